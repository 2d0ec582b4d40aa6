"""Guest credential bootstrap through a real browser session.

The explore page sets a ``gt`` cookie holding a guest token. Combined with
the public bearer token it is enough to call the search API.
"""

from __future__ import annotations

import asyncio
import logging

from selenium import webdriver
from selenium.common.exceptions import TimeoutException, WebDriverException
from selenium.webdriver.support.ui import WebDriverWait

from ..core.exceptions import CredentialError, NoGuestTokenError
from ..providers.twitter.config import ScraperConfig
from ..providers.twitter.constants import EXPLORE_URL, GUEST_TOKEN_COOKIE
from .context import AuthContext

logger = logging.getLogger(__name__)


def setup_driver(headless: bool = True) -> webdriver.Chrome:
    """Setup Chrome WebDriver for a throwaway session"""
    options = webdriver.ChromeOptions()
    if headless:
        options.add_argument("--headless=new")
    options.add_argument("--disable-dev-shm-usage")
    options.add_argument("--disable-gpu")
    options.add_argument("--window-size=800,600")
    options.add_argument("--incognito")
    return webdriver.Chrome(options=options)


def fetch_guest_token(
    explore_url: str = EXPLORE_URL, timeout: float = 30.0, headless: bool = True
) -> str:
    """Load the explore page and return the value of its guest token cookie.

    Raises:
        NoGuestTokenError: Cookie did not appear within ``timeout`` seconds
        CredentialError: Browser could not be started or driven
    """
    try:
        driver = setup_driver(headless)
    except WebDriverException as e:
        raise CredentialError(f"could not start browser: {e.msg}") from e

    try:
        driver.get(explore_url)
        cookie = WebDriverWait(driver, timeout).until(
            lambda d: d.get_cookie(GUEST_TOKEN_COOKIE)
        )
    except TimeoutException as e:
        raise NoGuestTokenError(f"no guest token cookie after {timeout}s") from e
    except WebDriverException as e:
        raise CredentialError(f"browser error: {e.msg}") from e
    finally:
        driver.quit()

    value = cookie.get("value") if isinstance(cookie, dict) else None
    if not value:
        raise NoGuestTokenError()
    return value


async def bootstrap_auth(config: ScraperConfig | None = None) -> AuthContext:
    """Obtain fresh guest credentials without blocking the event loop."""
    cfg = config or ScraperConfig()
    token = await asyncio.to_thread(
        fetch_guest_token, cfg.explore_url, cfg.bootstrap_timeout, cfg.headless
    )
    logger.info("guest_token_acquired", extra={"explore_url": cfg.explore_url})
    return AuthContext.for_guest(token)
