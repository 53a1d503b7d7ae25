"""Interactive collection of the project configuration.

The prompt flow is a small state machine. Each field is asked in turn; a
valid answer moves to the next field, an invalid one shows the validation
message and asks the same field again, and an operator abort (Ctrl+C or
Ctrl+D) ends the flow in the cancelled state.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from rich.prompt import Confirm, Prompt

from create_domus_app.config import DEFAULT_TYPESCRIPT_VERSION, ProjectConfig
from create_domus_app.exceptions import ScaffoldCancelledError

if TYPE_CHECKING:
    from create_domus_app.registry import VersionValidator

__all__ = ("CollectorState", "ConfigCollector", "PromptField")

TextAsker = Callable[[str, "str | None"], str]
ConfirmAsker = Callable[[str, bool], bool]


class CollectorState(str, Enum):
    """States of the prompt flow."""

    COLLECTING = "collecting"
    COMPLETE = "complete"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class PromptField:
    """One question of the prompt flow.

    Attributes:
        key: ``ProjectConfig`` attribute the answer is stored in.
        message: Prompt text.
        kind: ``"text"`` or ``"confirm"``.
        default: Default answer, or None when the field has none.
        validate: Returns a normalized answer and an error message; the message is None when valid.
    """

    key: str
    message: str
    kind: str
    default: Any
    validate: "Callable[[Any], tuple[Any, str | None]]"


def _ask_text(message: str, default: "str | None") -> str:
    if default is None:
        return Prompt.ask(message)
    return Prompt.ask(message, default=default)


def _ask_confirm(message: str, default: bool) -> bool:
    return Confirm.ask(message, default=default)


class ConfigCollector:
    """Collect a ``ProjectConfig`` from the operator."""

    def __init__(
        self,
        validator: "VersionValidator",
        *,
        ask_text: "TextAsker | None" = None,
        ask_confirm: "ConfirmAsker | None" = None,
        default_version: str = DEFAULT_TYPESCRIPT_VERSION,
    ) -> None:
        """Initialize the collector.

        Args:
            validator: Registry validator for the TypeScript version field.
            ask_text: Text prompt function. Defaults to ``rich.prompt.Prompt.ask``.
            ask_confirm: Yes/no prompt function. Defaults to ``rich.prompt.Confirm.ask``.
            default_version: Default answer for the TypeScript version.
        """
        self.validator = validator
        self.ask_text = ask_text or _ask_text
        self.ask_confirm = ask_confirm or _ask_confirm
        self.fields: tuple[PromptField, ...] = (
            PromptField("name", "[green]Project name[/]", "text", None, self._validate_name),
            PromptField(
                "typescript_version", "[green]TypeScript version[/]", "text", default_version, self._validate_version
            ),
            PromptField("use_eslint", "[green]Do you want to include ESLint?[/]", "confirm", True, self._accept),
        )
        self.state = CollectorState.COLLECTING
        self.index = 0
        self.answers: dict[str, Any] = {}

    @property
    def current_field(self) -> "PromptField | None":
        if self.state is not CollectorState.COLLECTING:
            return None
        return self.fields[self.index]

    @staticmethod
    def _validate_name(answer: Any) -> "tuple[Any, str | None]":
        name = (answer or "").strip()
        return name, None if name else "Project name is required"

    def _validate_version(self, answer: Any) -> "tuple[Any, str | None]":
        version = (answer or "").strip()
        if version and self.validator.exists("typescript", version):
            return version, None
        return version, "Invalid TypeScript version"

    @staticmethod
    def _accept(answer: Any) -> "tuple[Any, str | None]":
        return bool(answer), None

    def ask(self, field: PromptField) -> Any:
        if field.kind == "confirm":
            return self.ask_confirm(field.message, field.default)
        return self.ask_text(field.message, field.default)

    def advance(self, answer: Any) -> "str | None":
        """Feed an answer for the current field.

        Returns:
            The validation message when the answer was rejected, otherwise None.

        Raises:
            RuntimeError: If the flow is not collecting.
        """
        field = self.current_field
        if field is None:
            msg = f"Cannot answer a prompt in state {self.state.value!r}"
            raise RuntimeError(msg)
        value, error = field.validate(answer)
        if error is not None:
            return error
        self.answers[field.key] = value
        self.index += 1
        if self.index == len(self.fields):
            self.state = CollectorState.COMPLETE
        return None

    def cancel(self) -> None:
        self.state = CollectorState.CANCELLED

    def result(self) -> ProjectConfig:
        if self.state is not CollectorState.COMPLETE:
            msg = f"No configuration available in state {self.state.value!r}"
            raise RuntimeError(msg)
        return ProjectConfig(**self.answers)

    def run(self) -> ProjectConfig:
        """Run the prompt flow to completion.

        Raises:
            ScaffoldCancelledError: If the operator aborts a prompt.

        Returns:
            The collected configuration.
        """
        from create_domus_app.utils import console

        while (field := self.current_field) is not None:
            try:
                answer = self.ask(field)
            except (KeyboardInterrupt, EOFError):
                self.cancel()
                raise ScaffoldCancelledError(field.key) from None
            error = self.advance(answer)
            if error is not None:
                console.print(f"[red]{error}[/]")
        return self.result()
