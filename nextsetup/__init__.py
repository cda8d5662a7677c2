"""Interactive Next.js project setup wizard."""

from nextsetup.constants import SETUP_FAILED, SETUP_SUCCESS

__all__ = ["SETUP_SUCCESS", "SETUP_FAILED"]
