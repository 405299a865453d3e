"""
Media reference helpers.

Hosts paste share links; the player needs embed URLs.
"""

from __future__ import annotations

from urllib.parse import parse_qs, urlparse

YOUTUBE_EMBED = "https://www.youtube.com/embed/{video_id}"
VIMEO_EMBED = "https://player.vimeo.com/video/{video_id}"


def to_embed_url(url: str) -> str:
    """Convert a YouTube or Vimeo share link into its embeddable form.

    Args:
        url: Media reference as entered by the host.

    Returns:
        The embed URL, or the input unchanged when it is not a known provider
        link.
    """
    parsed = urlparse(url.strip())
    if not parsed.scheme:
        # pasted without a scheme: "www.youtube.com/watch?v=..."
        parsed = urlparse("https://" + url.strip())
    host = (parsed.hostname or "").lower()
    if host.startswith("www.") or host.startswith("m."):
        host = host.split(".", 1)[1]

    if host == "youtube.com" and parsed.path == "/watch":
        video_id = parse_qs(parsed.query).get("v", [""])[0]
        if video_id:
            return YOUTUBE_EMBED.format(video_id=video_id)

    if host == "youtu.be":
        video_id = parsed.path.lstrip("/").split("/")[0]
        if video_id:
            return YOUTUBE_EMBED.format(video_id=video_id)

    if host == "vimeo.com":
        video_id = parsed.path.lstrip("/").split("/")[0]
        if video_id.isdigit():
            return VIMEO_EMBED.format(video_id=video_id)

    return url
