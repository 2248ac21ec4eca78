"""Content parts carried by messages, reasoning items and function outputs."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from .base import ProtocolModel, tagged_union
from .enums import ImageDetail


class UrlCitation(ProtocolModel):
    """Citation of a web resource inside output text."""

    type: Literal["url_citation"] = "url_citation"
    url: str
    title: str
    start_index: int
    end_index: int


class FileCitation(ProtocolModel):
    type: Literal["file_citation"] = "file_citation"
    file_id: str
    filename: str
    index: int


class ContainerFileCitation(ProtocolModel):
    type: Literal["container_file_citation"] = "container_file_citation"
    container_id: str
    file_id: str
    filename: str
    start_index: int
    end_index: int


class FilePath(ProtocolModel):
    type: Literal["file_path"] = "file_path"
    file_id: str
    index: int


Annotation = tagged_union("Annotation", UrlCitation, FileCitation, ContainerFileCitation, FilePath)


class TopLogProb(ProtocolModel):
    token: str
    logprob: float
    bytes: list[int] = Field(default_factory=list)


class LogProb(ProtocolModel):
    """Log-probability of one sampled token with its top alternatives."""

    token: str
    logprob: float
    bytes: list[int] = Field(default_factory=list)
    top_logprobs: list[TopLogProb] = Field(default_factory=list)


class InputText(ProtocolModel):
    type: Literal["input_text"] = "input_text"
    text: str

    @classmethod
    def of(cls, text: str) -> InputText:
        return cls(text=text)


class InputImage(ProtocolModel):
    type: Literal["input_image"] = "input_image"
    image_url: str | None = None
    detail: ImageDetail = "auto"

    @classmethod
    def from_url(cls, url: str, detail: ImageDetail = "auto") -> InputImage:
        return cls(image_url=url, detail=detail)


class InputFile(ProtocolModel):
    """File input given either by URL or by inline base64 data.

    ``file_url`` and ``file_data`` are meant to be exclusive, but both are
    accepted on decode as providers send them.
    """

    type: Literal["input_file"] = "input_file"
    filename: str | None = None
    file_data: str | None = None
    file_url: str | None = None

    @classmethod
    def from_url(cls, url: str) -> InputFile:
        return cls(file_url=url)

    @classmethod
    def from_data(cls, data: str, filename: str | None = None) -> InputFile:
        return cls(file_data=data, filename=filename)


class InputVideo(ProtocolModel):
    type: Literal["input_video"] = "input_video"
    video_url: str

    @classmethod
    def from_url(cls, url: str) -> InputVideo:
        return cls(video_url=url)


class OutputText(ProtocolModel):
    """Model-produced text with citations and optional token log-probabilities."""

    type: Literal["output_text"] = "output_text"
    text: str
    annotations: list[Annotation] = Field(default_factory=list)
    logprobs: list[LogProb] | None = None

    @classmethod
    def of(cls, text: str) -> OutputText:
        return cls(text=text)


class Refusal(ProtocolModel):
    type: Literal["refusal"] = "refusal"
    refusal: str

    @classmethod
    def of(cls, text: str) -> Refusal:
        return cls(refusal=text)


class PlainText(ProtocolModel):
    type: Literal["text"] = "text"
    text: str


class SummaryText(ProtocolModel):
    type: Literal["summary_text"] = "summary_text"
    text: str


class ReasoningText(ProtocolModel):
    type: Literal["reasoning_text"] = "reasoning_text"
    text: str


Content = tagged_union(
    "Content",
    InputText,
    InputImage,
    InputFile,
    InputVideo,
    OutputText,
    Refusal,
    PlainText,
    SummaryText,
    ReasoningText,
)
