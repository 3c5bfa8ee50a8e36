"""Owner notifications through the hosted notification service."""

from typing import Optional

import httpx

TITLE_MAX_LENGTH = 1200
CONTENT_MAX_LENGTH = 20000

SEND_NOTIFICATION_PATH = "webdevtoken.v1.WebDevService/SendNotification"


class NotificationError(Exception):
    """Notification request rejected before it was sent."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def validate_payload(title: Optional[str], content: Optional[str]) -> tuple[str, str]:
    """
    Trim and check a notification.

    Raises:
        NotificationError: 400 when a field is blank or too long
    """
    if not isinstance(title, str) or not title.strip():
        raise NotificationError(400, "Notification title is required.")
    if not isinstance(content, str) or not content.strip():
        raise NotificationError(400, "Notification content is required.")

    title = title.strip()
    content = content.strip()
    if len(title) > TITLE_MAX_LENGTH:
        raise NotificationError(
            400, f"Notification title must be at most {TITLE_MAX_LENGTH} characters."
        )
    if len(content) > CONTENT_MAX_LENGTH:
        raise NotificationError(
            400, f"Notification content must be at most {CONTENT_MAX_LENGTH} characters."
        )
    return title, content


def build_endpoint_url(base_url: str) -> str:
    """Join the service base URL and the send path."""
    if not base_url.endswith("/"):
        base_url = f"{base_url}/"
    return f"{base_url}{SEND_NOTIFICATION_PATH}"


async def notify_owner(
    title: Optional[str],
    content: Optional[str],
    api_url: Optional[str],
    api_key: Optional[str],
    client: Optional[httpx.AsyncClient] = None,
) -> bool:
    """
    Send a notification to the project owner.

    Args:
        title: Notification title
        content: Notification body
        api_url: Notification service base URL
        api_key: Bearer token for the service
        client: Optional HTTP client (a fresh one is used otherwise)

    Returns:
        True when the service accepted the message, False on any
        delivery failure

    Raises:
        NotificationError: invalid payload (400) or missing configuration (500)
    """
    title, content = validate_payload(title, content)

    if not api_url:
        raise NotificationError(500, "Notification service URL is not configured.")
    if not api_key:
        raise NotificationError(500, "Notification service API key is not configured.")

    endpoint = build_endpoint_url(api_url)
    headers = {
        "accept": "application/json",
        "authorization": f"Bearer {api_key}",
        "content-type": "application/json",
        "connect-protocol-version": "1",
    }

    try:
        if client is None:
            async with httpx.AsyncClient(timeout=30.0) as owned_client:
                response = await owned_client.post(
                    endpoint, json={"title": title, "content": content}, headers=headers
                )
        else:
            response = await client.post(
                endpoint, json={"title": title, "content": content}, headers=headers
            )
    except httpx.HTTPError as e:
        print(f"[NOTIFY] Error calling notification service: {e}")
        return False

    if not response.is_success:
        detail = response.text
        print(
            f"[NOTIFY] Failed to notify owner ({response.status_code} "
            f"{response.reason_phrase}){f': {detail}' if detail else ''}"
        )
        return False

    return True
