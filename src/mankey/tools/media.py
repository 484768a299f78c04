# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Media file tools."""

from __future__ import annotations

from typing import Any

from ..core.client import AnkiConnectClient
from ..core.exceptions import ValidationException
from ..core.schema import boolean, obj, string
from .base import ToolDef


async def store_media_file(
    client: AnkiConnectClient,
    filename: str,
    data: str | None = None,
    url: str | None = None,
    path: str | None = None,
    delete_existing: bool = True,
) -> Any:
    """Store a media file from base64 data, a URL or a local path."""
    if not (data or url or path):
        raise ValidationException("storeMediaFile requires one of: data (base64), url, or path", field="(root)")
    return await client.invoke(
        "storeMediaFile",
        {
            "filename": filename,
            "data": data,
            "url": url,
            "path": path,
            "deleteExisting": delete_existing,
        },
    )


MEDIA_TOOLS = [
    ToolDef(
        name="storeMediaFile",
        category="media",
        description=(
            "Stores a media file in Anki's media folder. REQUIRES one of: data (base64), path, or url. Media is "
            "automatically synced to AnkiWeb. Supported formats: images (jpg, png, gif, svg), audio (mp3, ogg, wav), "
            "video (mp4, webm). File is available immediately for use in cards with HTML tags like <img> or "
            "[sound:]. Example with base64: {filename: 'test.txt', data: 'SGVsbG8gV29ybGQ='}. Returns filename on "
            "success"
        ),
        schema=obj(
            filename=string().describe("File name"),
            data=string().optional().describe("Base64-encoded file content"),
            url=string().optional().describe("URL to download from"),
            path=string().optional().describe("Local file path to read from"),
            deleteExisting=boolean().optional().default(True).describe("Replace if file exists"),
        ),
        handler=store_media_file,
    ),
    ToolDef(
        name="retrieveMediaFile",
        category="media",
        description=(
            "Retrieves a media file from Anki's collection as base64-encoded data. Specify just the filename (not "
            "full path). Returns false if file doesn't exist. Useful for backing up media or transferring between "
            "collections. Large files may take time to encode"
        ),
        schema=obj(filename=string().describe("File name")),
    ),
    ToolDef(
        name="getMediaFilesNames",
        category="media",
        description=(
            "Lists all media files in the collection including images, audio, and video files. Pattern supports "
            "wildcards (* and ?). Returns array of filenames (not paths). Useful for media management, finding "
            "unused files, or bulk operations. Large collections may have thousands of files"
        ),
        schema=obj(pattern=string().optional().describe("File pattern")),
    ),
    ToolDef(
        name="deleteMediaFile",
        category="media",
        description=(
            "Permanently deletes a media file from the collection. CAUTION: Cannot be undone. File is removed "
            "immediately and will be deleted from AnkiWeb on next sync. Cards referencing the file will show broken "
            "media. Consider checking usage with findNotes before deletion"
        ),
        schema=obj(filename=string().describe("File name")),
    ),
    ToolDef(
        name="getMediaDirPath",
        category="media",
        description=(
            "Gets absolute filesystem path to Anki's media folder where images, audio, and video files are stored. "
            "Path varies by OS and profile. Useful for direct media file operations or backup scripts. Typically: "
            "~/Anki2/ProfileName/collection.media/"
        ),
        schema=obj(),
    ),
]
