"""Comment request and response models."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.configs.settings import MAX_COMMENT_LENGTH


class CommentCreate(BaseModel):
    """Comment creation body."""

    comment: str = Field(
        ...,
        min_length=1,
        max_length=MAX_COMMENT_LENGTH,
        description="Comment text",
        examples=["Offsets drift, keyset pagination does not."],
    )

    @field_validator("comment")
    @classmethod
    def reject_blank(cls, value: str) -> str:
        """Strip surrounding whitespace; a whitespace-only comment is empty."""
        stripped = value.strip()
        if not stripped:
            mssg = "Comment cannot be empty"
            raise ValueError(mssg)
        return stripped


class CommentCreated(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    comment_id: int = Field(alias="commentId")


class CommentDeleted(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    comment_id: int = Field(alias="commentId")


class CommentBrief(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    comment: str


class CommentList(BaseModel):
    comments: list[CommentBrief]
