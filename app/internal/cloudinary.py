"""
Cloudinary image host: unsigned uploads of data URIs and delivery URL rewriting.
"""

from typing import Optional
from app import config
from app.exceptions import ExternalServiceError, ValidationError
import httpx
import logging
import re

logger = logging.getLogger(__name__)

ALLOWED_IMAGE_TYPES = ('image/jpeg', 'image/jpg', 'image/png', 'image/gif', 'image/webp')

UPLOAD_TRANSFORMATION = 'w_800,h_600,c_limit,q_auto:good,f_auto'
OPTIMIZED_TRANSFORMATION = 'w_800,c_limit,q_auto,f_auto'
THUMBNAIL_TRANSFORMATION = 'w_200,h_150,c_fill,q_auto,f_auto'

TRANSFORMATION_PARAMETERS = (
    'a', 'ar', 'b', 'bo', 'c', 'co', 'cs', 'd', 'dl', 'dn', 'dpr', 'e', 'f', 'fl',
    'g', 'h', 'l', 'o', 'pg', 'q', 'r', 't', 'u', 'w', 'x', 'y', 'z'
)
VERSION_SEGMENT = re.compile(r'^v\d+$')


def is_data_uri(value: Optional[str]) -> bool:
    return isinstance(value, str) and value.startswith('data:')

def get_base64_size(value: str) -> int:
    """Decoded size in bytes of a base64 payload, with or without the data URI prefix."""
    if not value:
        return 0
    data = value.split(',', 1)[1] if ',' in value else value
    return round(len(data) * 3 / 4)

def validate_data_uri(value: str) -> str:
    """
    Checks that `value` is a base64 data URI of an accepted image type that is
    not larger than `MAX_IMAGE_SIZE`. Returns the mime type.
    """

    header, separator, data = value.partition(',')
    if not is_data_uri(header) or not separator or ';base64' not in header or not data:
        raise ValidationError('Invalid image data. Expected a base64 encoded data URI.')

    mime_type = header[len('data:'):].split(';')[0].lower()
    if mime_type not in ALLOWED_IMAGE_TYPES:
        raise ValidationError('Invalid file type. Please upload JPG, PNG, GIF, or WebP images.')

    if get_base64_size(data) > config.MAX_IMAGE_SIZE:
        raise ValidationError('File too large. Maximum size is 10MB.')

    return mime_type

def is_transformation_segment(segment: str) -> bool:
    components = segment.split(',')
    return all(
        '_' in component and component.split('_', 1)[0] in TRANSFORMATION_PARAMETERS
        for component in components
    )

def build_delivery_url(cloud_name: str, public_id: str, transformation: str) -> str:
    return f'https://res.cloudinary.com/{cloud_name}/image/upload/{transformation}/{public_id}'

def _rewrite(url: Optional[str], transformation: str) -> Optional[str]:
    if not url or is_data_uri(url) or 'cloudinary.com' not in url:
        return url

    parts = url.split('/')
    if 'upload' not in parts or len(parts) < 4:
        return url

    upload_index = parts.index('upload')
    segments = parts[upload_index + 1:]
    while len(segments) > 1 and (is_transformation_segment(segments[0]) or VERSION_SEGMENT.match(segments[0])):
        segments = segments[1:]
    if not segments:
        return url

    segments[-1] = segments[-1].rsplit('.', 1)[0]
    cloud_name = parts[3]

    return build_delivery_url(cloud_name, '/'.join(segments), transformation)

def optimize_url(url: Optional[str]) -> Optional[str]:
    return _rewrite(url, OPTIMIZED_TRANSFORMATION)

def thumbnail_url(url: Optional[str]) -> Optional[str]:
    return _rewrite(url, THUMBNAIL_TRANSFORMATION)

def is_configured() -> bool:
    return bool(config.CLOUDINARY_CLOUD_NAME)

async def upload_image(data_uri: str, client: Optional[httpx.AsyncClient] = None) -> str:
    """
    Uploads a base64 data URI with the unsigned upload preset and returns the
    optimized delivery URL. Single attempt, failures raise `ExternalServiceError`.
    """

    if not is_configured():
        raise ExternalServiceError('Image upload is not configured')

    validate_data_uri(data_uri)

    url = f'https://api.cloudinary.com/v1_1/{config.CLOUDINARY_CLOUD_NAME}/image/upload'
    owns_client = client is None
    client = client or httpx.AsyncClient(timeout=config.EXTERNAL_TIMEOUT)

    try:
        response = await client.post(url, data={'file': data_uri, 'upload_preset': config.CLOUDINARY_UPLOAD_PRESET})
        response.raise_for_status()
        public_id = response.json()['public_id']
    except httpx.HTTPStatusError as e:
        logger.error(f'Cloudinary upload failed: {e.response.status_code} {e.response.text[:500]}')
        raise ExternalServiceError('Failed to upload image. Please try again.')
    except (httpx.HTTPError, ValueError, KeyError) as e:
        logger.error(f'Cloudinary upload error: {e}')
        raise ExternalServiceError('Failed to upload image. Please try again.')
    finally:
        if owns_client:
            await client.aclose()

    return build_delivery_url(config.CLOUDINARY_CLOUD_NAME, public_id, UPLOAD_TRANSFORMATION)
