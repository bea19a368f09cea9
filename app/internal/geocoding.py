"""
Reverse geocoding through Nominatim (OpenStreetMap).
"""

from typing import Optional
from app import config
from app.exceptions import ExternalServiceError
import httpx
import logging

logger = logging.getLogger(__name__)


def format_address(lat: float, lng: float, data: dict) -> dict:
    address = data.get('address') or {}
    city = address.get('city') or address.get('town') or address.get('village') or ''

    full_address = ', '.join(part for part in [
        address.get('road') or address.get('neighbourhood'),
        address.get('suburb') or address.get('city_district'),
        city,
        address.get('state'),
        address.get('postcode')
    ] if part)

    return {
        'fullAddress': full_address or data.get('display_name', ''),
        'city': city,
        'state': address.get('state', ''),
        'country': address.get('country', ''),
        'postcode': address.get('postcode', ''),
        'lat': lat,
        'lng': lng
    }

async def reverse_geocode(lat: float, lng: float, client: Optional[httpx.AsyncClient] = None) -> dict:
    params = {
        'format': 'json',
        'lat': lat,
        'lon': lng,
        'addressdetails': 1
    }
    headers = {
        'Accept-Language': 'en',
        'User-Agent': config.GEOCODER_USER_AGENT
    }

    owns_client = client is None
    client = client or httpx.AsyncClient(timeout=config.EXTERNAL_TIMEOUT)

    try:
        response = await client.get(config.GEOCODER_URL, params=params, headers=headers)
        response.raise_for_status()
        data = response.json()
    except httpx.HTTPStatusError as e:
        logger.error(f'Reverse geocoding failed: {e.response.status_code} {e.response.text[:500]}')
        raise ExternalServiceError('Failed to fetch address')
    except (httpx.HTTPError, ValueError) as e:
        logger.error(f'Reverse geocoding error: {e}')
        raise ExternalServiceError('Failed to fetch address')
    finally:
        if owns_client:
            await client.aclose()

    if not isinstance(data, dict) or 'error' in data:
        logger.warning(f'No address found for ({lat}, {lng})')
        raise ExternalServiceError('No address found')

    return format_address(lat, lng, data)
