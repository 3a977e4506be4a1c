"""In-memory fake implementation of TemplateCloner for testing."""

from pathlib import Path

from create_seed.core.cloner.abc import TemplateCloner
from create_seed.core.errors import TemplateCloneError


class FakeTemplateCloner(TemplateCloner):
    """Writes pre-configured files instead of cloning.

    All state is provided via constructor using keyword arguments.
    This class has NO public setup methods.
    """

    def __init__(
        self,
        *,
        files: dict[str, str] | None = None,
        should_fail: bool = False,
        failure_message: str = "Simulated clone failure",
    ) -> None:
        """Create FakeTemplateCloner.

        Args:
            files: Mapping of relative path -> content written on clone()
            should_fail: If True, clone() raises TemplateCloneError
            failure_message: Message for the raised error
        """
        self._files = files or {}
        self._should_fail = should_fail
        self._failure_message = failure_message
        self._clone_calls: list[tuple[str, Path]] = []

    @property
    def clone_calls(self) -> list[tuple[str, Path]]:
        """Get the list of (template_ref, destination) clone() calls.

        This property is for test assertions only.
        """
        return self._clone_calls.copy()

    def clone(self, template_ref: str, destination: Path) -> None:
        self._clone_calls.append((template_ref, destination))
        if self._should_fail:
            raise TemplateCloneError(self._failure_message)

        destination.mkdir(parents=True, exist_ok=True)
        for rel_path, content in self._files.items():
            file_path = destination / rel_path
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text(content, encoding="utf-8")
