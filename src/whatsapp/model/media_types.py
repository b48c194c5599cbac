from enum import Enum

from util.errors import InvalidMediaTypeError

# https://developers.facebook.com/docs/whatsapp/cloud-api/reference/media#supported-media-types
# Types follow the IANA registry: https://www.iana.org/assignments/media-types


class MediaClass(Enum):
    audio = "audio"
    document = "document"
    image = "image"
    sticker = "sticker"
    video = "video"


AUDIO_TYPES = frozenset({
    "audio/aac",
    "audio/amr",
    "audio/mpeg",
    "audio/mp4",
    "audio/ogg",
})

DOCUMENT_TYPES = frozenset({
    "text/plain",
    "application/pdf",
    "application/vnd.ms-powerpoint",
    "application/msword",
    "application/vnd.ms-excel",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "application/vnd.openxmlformats-officedocument.presentationml.presentation",
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
})

IMAGE_TYPES = frozenset({
    "image/jpeg",
    "image/png",
})

STICKER_TYPES = frozenset({
    "image/webp",
})

VIDEO_TYPES = frozenset({
    "video/mp4",
    "video/3gp",
})

MEDIA_TYPES_BY_CLASS: dict[MediaClass, frozenset[str]] = {
    MediaClass.audio: AUDIO_TYPES,
    MediaClass.document: DOCUMENT_TYPES,
    MediaClass.image: IMAGE_TYPES,
    MediaClass.sticker: STICKER_TYPES,
    MediaClass.video: VIDEO_TYPES,
}

SUPPORTED_MEDIA_TYPES = frozenset().union(*MEDIA_TYPES_BY_CLASS.values())


def is_supported(media_type: str) -> bool:
    return media_type in SUPPORTED_MEDIA_TYPES


def media_class_of(media_type: str) -> MediaClass | None:
    for media_class, media_types in MEDIA_TYPES_BY_CLASS.items():
        if media_type in media_types:
            return media_class
    return None


def ensure_supported(media_type: str) -> str:
    if not is_supported(media_type):
        raise InvalidMediaTypeError(media_type)
    return media_type


def to_content_type_header(media_type: str) -> str:
    # media types map 1:1 to the content-type header for now
    return media_type
