"""Blocking prompt loop built on questionary."""

from __future__ import annotations

import logging

from newgo.core.validation import Validator, is_yes_no

logger = logging.getLogger(__name__)


class Prompter:
    """Ask for a field until its validator accepts the answer.

    There is no retry limit: the loop only ends with an accepted answer or
    with a :class:`KeyboardInterrupt` when the user cancels the prompt.
    """

    def prompt(self, field_label: str, display_message: str, validator: Validator) -> str:
        import questionary

        while True:
            try:
                answer = questionary.text(display_message).ask()
            except OSError as exc:
                logger.debug("Reading %s failed: %s", field_label, exc)
                print("Error reading input, please try again!")
                continue
            except EOFError:
                raise KeyboardInterrupt from None
            if answer is None:
                raise KeyboardInterrupt

            value = answer.strip()
            if not validator(value):
                print(f"{field_label} is not valid, try again!")
                continue
            return value

    def confirm(self, field_label: str, display_message: str) -> bool:
        return self.prompt(field_label, display_message, is_yes_no).lower() == "y"


__all__ = ["Prompter"]
