"""Pydantic models for Sketchfab API payloads."""

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class ModelFormat(str, Enum):
    """Archive formats offered by the Sketchfab download endpoint."""

    GLTF = "gltf"
    GLB = "glb"
    USDZ = "usdz"
    SOURCE = "source"


# Order used when the requested format is missing from a download descriptor.
FORMAT_PRIORITY: List[ModelFormat] = [
    ModelFormat.GLTF,
    ModelFormat.GLB,
    ModelFormat.USDZ,
    ModelFormat.SOURCE,
]


class _ApiModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


def _none_to_list(v: Any) -> Any:
    return [] if v is None else v


class ThumbnailImage(_ApiModel):
    url: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    size: Optional[int] = None


class Thumbnails(_ApiModel):
    images: List[ThumbnailImage] = Field(default_factory=list)

    @field_validator("images", mode="before")
    @classmethod
    def null_images(cls, v: Any) -> Any:
        return _none_to_list(v)


class ModelUser(_ApiModel):
    username: Optional[str] = None
    display_name: Optional[str] = Field(None, alias="displayName")
    uri: Optional[str] = None


class Tag(_ApiModel):
    slug: Optional[str] = None
    name: Optional[str] = None
    uri: Optional[str] = None


class Category(_ApiModel):
    name: Optional[str] = None
    slug: Optional[str] = None
    uri: Optional[str] = None


class License(_ApiModel):
    """License summary; Sketchfab sends an object, older payloads a bare label."""

    uid: Optional[str] = None
    label: Optional[str] = None
    slug: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def label_only(cls, v: Any) -> Any:
        if isinstance(v, str):
            return {"label": v}
        return v


class SketchfabModel(_ApiModel):
    """
    Catalog entry describing one 3D model (metadata only).

    Only the rendered fields are strict; everything else is passed through
    loosely so payload changes on Sketchfab's side do not break the tools.
    """

    uid: str = Field(..., description="Opaque model identifier")
    name: str = Field(..., description="Display name")
    description: Optional[str] = None
    viewer_url: Optional[str] = Field(None, alias="viewerUrl")
    thumbnails: Optional[Thumbnails] = None
    user: Optional[ModelUser] = None
    is_downloadable: bool = Field(False, alias="isDownloadable")
    download_count: Optional[Any] = Field(None, alias="downloadCount")
    view_count: Optional[Any] = Field(None, alias="viewCount")
    like_count: Optional[Any] = Field(None, alias="likeCount")
    license: Optional[License] = None
    created_at: Optional[Any] = Field(None, alias="createdAt")
    face_count: Optional[Any] = Field(None, alias="faceCount")
    vertex_count: Optional[Any] = Field(None, alias="vertexCount")
    tags: List[Tag] = Field(default_factory=list)
    categories: List[Category] = Field(default_factory=list)

    @field_validator("tags", "categories", mode="before")
    @classmethod
    def null_lists(cls, v: Any) -> Any:
        return _none_to_list(v)

    @field_validator("is_downloadable", mode="before")
    @classmethod
    def null_is_not_downloadable(cls, v: Any) -> Any:
        return False if v is None else v

    @property
    def thumbnail_url(self) -> Optional[str]:
        if self.thumbnails:
            for image in self.thumbnails.images:
                if image.url:
                    return image.url
        return None

    @property
    def username(self) -> Optional[str]:
        return self.user.username if self.user else None


class SearchResults(_ApiModel):
    """One page of search results plus pagination cursors."""

    results: List[SketchfabModel] = Field(default_factory=list)
    next: Optional[str] = None
    previous: Optional[str] = None

    @field_validator("results", mode="before")
    @classmethod
    def null_results(cls, v: Any) -> Any:
        return _none_to_list(v)


class DownloadLink(_ApiModel):
    """Signed, expiring URL for one archive format."""

    url: str
    expires: Optional[int] = Field(None, description="Seconds until the URL expires")
    size: Optional[int] = Field(None, description="Archive size in bytes")


class DownloadLinks(_ApiModel):
    """Download descriptor: format name to signed URL."""

    gltf: Optional[DownloadLink] = None
    glb: Optional[DownloadLink] = None
    usdz: Optional[DownloadLink] = None
    source: Optional[DownloadLink] = None

    def get(self, fmt: ModelFormat) -> Optional[DownloadLink]:
        return getattr(self, ModelFormat(fmt).value)

    def first_available(self) -> Optional[ModelFormat]:
        """Return the first format in FORMAT_PRIORITY that has a link."""
        for fmt in FORMAT_PRIORITY:
            if self.get(fmt) is not None:
                return fmt
        return None
