"""Discussion form handling."""

from pydantic import BaseModel

from harvest.adapter.api import DiscussionInput, RemoteDiscussion
from harvest.domain.value import DiscussionCategory

from .error import FormValidationError


def parse_tags(text: str) -> list[str]:
    """Split comma-separated tag text, trimming entries and dropping blanks."""
    return [tag.strip() for tag in text.split(",") if tag.strip()]


class DiscussionForm(BaseModel):
    """Raw values of the create/edit discussion form."""

    title: str = ""
    description: str = ""
    category: str = ""
    tags: str = ""  # Comma-separated

    @classmethod
    def from_discussion(cls, discussion: RemoteDiscussion) -> "DiscussionForm":
        """Prefill the form for editing an existing discussion."""
        return cls(
            title=discussion.title,
            description=discussion.description,
            category=discussion.category,
            tags=", ".join(discussion.tags),
        )

    def to_input(self) -> DiscussionInput:
        """Validate the form and build the request body.

        Raises:
            FormValidationError: On the first missing or invalid field
        """
        title = self.title.strip()
        description = self.description.strip()
        category = self.category.strip().lower()

        if not title:
            raise FormValidationError("Title is required")
        if not description:
            raise FormValidationError("Description is required")
        if not category:
            raise FormValidationError("Category is required")
        if category not in {c.value for c in DiscussionCategory}:
            raise FormValidationError(f"Unknown category: {self.category}")

        return DiscussionInput(
            title=title,
            description=description,
            category=category,
            tags=parse_tags(self.tags),
        )
