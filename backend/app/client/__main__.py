"""Print the user directory: python -m app.client"""

import asyncio

from app.client.user_list import UserListView
from app.client.users_api import UsersApiClient
from app.config import get_settings
from app.infrastructure.observability import setup_logging


async def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, "text")
    async with UsersApiClient(
        settings.api_base_url, settings.api_timeout_seconds,
    ) as api:
        view = UserListView(api)
        await view.load_users()
        print(view.render())


if __name__ == "__main__":
    asyncio.run(main())
