"""GraphQL documents sent to the backend, one per entity type."""

from __future__ import annotations

CHANNEL_QUERY = """\
query ChannelStream($channelName: String!, $platform: String!, $playerType: String!) {
  channel: user(login: $channelName) {
    displayName
    stream {
      title
      createdAt
      language
      game {
        displayName
      }
      playbackAccessToken(params: {platform: $platform, playerType: $playerType}) {
        signature
        value
      }
    }
  }
}
"""

VIDEO_QUERY = """\
query Video($vodID: ID!, $platform: String!, $playerType: String!) {
  video(id: $vodID) {
    title
    description
    owner {
      displayName
    }
    game {
      displayName
    }
    recordedAt
    duration
    language
    playbackAccessToken(params: {platform: $platform, playerType: $playerType}) {
      signature
      value
    }
  }
}
"""

CLIP_QUERY = """\
query Clip($slug: ID!, $platform: String!, $playerType: String!) {
  clip(slug: $slug) {
    title
    broadcaster {
      displayName
    }
    game {
      displayName
    }
    createdAt
    durationSeconds
    language
    playbackAccessToken(params: {platform: $platform, playerType: $playerType}) {
      signature
      value
    }
  }
}
"""

CHANNEL_VIDEOS_QUERY = """\
query ChannelVideos(
  $channelName: String!
  $first: Int!
  $after: Cursor
  $type: BroadcastType
  $sort: VideoSort
) {
  user(login: $channelName) {
    displayName
    videos(first: $first, after: $after, type: $type, sort: $sort) {
      edges {
        cursor
        node {
          id
          title
          publishedAt
          lengthSeconds
          language
          game {
            displayName
          }
        }
      }
      pageInfo {
        hasNextPage
      }
    }
  }
}
"""
