"""Typed shapes of the backend GraphQL responses.

Only the fields the resolvers read are modelled; unknown keys are ignored.
Every response is ``{"data": {<key>: <entity or null>}}``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class GqlModel(BaseModel):
    """Base for backend shapes: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


# Shared


class Game(GqlModel):
    display_name: str


class User(GqlModel):
    display_name: str


class PlaybackAccessToken(GqlModel):
    signature: str
    value: str


# Channel


class Stream(GqlModel):
    title: str
    created_at: str
    language: str | None = None
    game: Game | None = None
    playback_access_token: PlaybackAccessToken


class Channel(GqlModel):
    display_name: str
    stream: Stream | None = None


class ChannelData(GqlModel):
    channel: Channel | None = None


class ChannelResponse(GqlModel):
    data: ChannelData


# Video


class Video(GqlModel):
    title: str
    description: str | None = None
    owner: User
    game: Game | None = None
    recorded_at: str
    duration: str
    language: str | None = None
    playback_access_token: PlaybackAccessToken


class VideoData(GqlModel):
    video: Video | None = None


class VideoResponse(GqlModel):
    data: VideoData


# Clip


class Clip(GqlModel):
    title: str
    broadcaster: User
    game: Game | None = None
    created_at: str
    duration_seconds: int
    language: str | None = None
    playback_access_token: PlaybackAccessToken


class ClipData(GqlModel):
    clip: Clip | None = None


class ClipResponse(GqlModel):
    data: ClipData


class ClipTokenValue(BaseModel):
    """JSON document embedded in the clip's access token ``value``."""

    clip_uri: str


# Channel videos


class ListedVideo(GqlModel):
    id: str
    title: str
    published_at: str | None = None
    length_seconds: int | None = None
    language: str | None = None
    game: Game | None = None


class VideoEdge(GqlModel):
    cursor: str | None = None
    node: ListedVideo | None = None


class PageInfo(GqlModel):
    has_next_page: bool = False


class VideoConnection(GqlModel):
    edges: list[VideoEdge] = Field(default_factory=list)
    page_info: PageInfo = Field(default_factory=PageInfo)


class ChannelVideosUser(GqlModel):
    display_name: str
    videos: VideoConnection | None = None


class ChannelVideosData(GqlModel):
    user: ChannelVideosUser | None = None


class ChannelVideosResponse(GqlModel):
    data: ChannelVideosData
