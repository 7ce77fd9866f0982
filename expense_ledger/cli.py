"""Command-line entry point: routes a verb and its arguments to the store.

``main`` is the only place that turns a ``StoreError`` into a non-zero exit.
"""

from __future__ import annotations

import sys
from typing import Callable, Optional, Sequence

from pydantic import ValidationError

from .errors import StoreError
from .logging_utils import configure_root_logger, get_logger
from .store import ExpenseStore

LOGGER = get_logger(__name__)

CLEAR_PROMPT = "This will remove all expenses. Are you sure? (y/n)"

HELP_TEXT = """\
An expense recording system

Commands:

add AMOUNT MEMO [DATE] - record a new expense
clear - delete all expenses
list - list all expenses
delete NUMBER - remove expense with id NUMBER
search QUERY - list expenses with a matching memo field"""


def confirm(prompt: str) -> bool:
    """Block on stdin for an answer. Only an exact "y" counts as yes."""
    print(prompt)
    try:
        answer = input()
    except EOFError:
        return False
    return answer == "y"


class CommandRouter:
    def __init__(
        self,
        store: ExpenseStore,
        confirm: Callable[[str], bool] = confirm,
    ) -> None:
        self.store = store
        self.confirm = confirm

    def dispatch(self, args: Sequence[str]) -> None:
        args = list(args)
        # leading options are ignored; the first plain token is the verb
        while args and args[0].startswith("-"):
            args.pop(0)
        command = args[0] if args else None
        params = list(args[1:])

        if command == "list":
            self.store.list()
        elif command == "add":
            self.add(params)
        elif command == "search":
            if not params:
                print("You must provide a search term.")
                return
            self.store.search(params[0])
        elif command == "delete":
            if not params:
                print("You must provide an id.")
                return
            self.store.delete_by_id(params[0])
        elif command == "clear":
            if self.confirm(CLEAR_PROMPT):
                self.store.delete_all()
        else:
            display_help()

    def add(self, params: list[str]) -> None:
        if len(params) < 2:
            print("You must provide an amount and memo.")
            return
        amount, memo = params[0], params[1]
        created_on = params[2] if len(params) > 2 else None
        try:
            self.store.add(amount, memo, created_on)
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
            )
            print(f"Invalid expense: {problems}")


def display_help() -> None:
    print(HELP_TEXT)


def main(argv: Optional[Sequence[str]] = None) -> int:
    configure_root_logger()
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        CommandRouter(ExpenseStore()).dispatch(args)
    except StoreError as e:
        LOGGER.debug("Database operation failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    return 0


if __name__ == "__main__":
    main()
