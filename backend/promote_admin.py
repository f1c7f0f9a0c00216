#!/usr/bin/env python3
"""
Bir kullanıcı profiline Admin rolü verir (users/{uid}.role = "Admin").

Usage: python -m backend.promote_admin <uid>
"""
import asyncio
import sys

from dotenv import load_dotenv

from backend.planner.config import get_db, get_settings
from backend.planner.core.constants import ROLE_ADMIN
from backend.planner.core.errors import PlannerError
from backend.planner.services.user_profiles import UserProfileService


async def promote_admin(uid: str, service: UserProfileService) -> bool:
    """Profil yoksa oluşturur, sonra rolü Admin yapar."""
    try:
        existed = await service.save_user(uid)
        print(f"✅ User {'found' if existed else 'created'}: {uid}")

        profile = await service.get_user_by_id(uid)
        if profile.is_admin:
            print(f"✅ {uid} is already an admin")
            return True

        await service.update_user(uid, {"role": ROLE_ADMIN})
        print(f"✅ Role set to {ROLE_ADMIN} for: {uid}")
        return True
    except PlannerError as e:
        print(f"❌ Error promoting user: {e.message}")
        return False


def main(argv: list[str]) -> int:
    if len(argv) != 2:
        print("Usage: python -m backend.promote_admin <uid>")
        print("Example: python -m backend.promote_admin s1")
        return 1

    load_dotenv()
    settings = get_settings()
    service = UserProfileService(get_db(), timeout=settings.request_timeout_seconds)

    uid = argv[1]
    print(f"Setting admin role for: {uid}")
    if asyncio.run(promote_admin(uid, service)):
        print("🎉 Admin role set successfully!")
        return 0
    print("💥 Failed to set admin role")
    return 1


if __name__ == "__main__":
    sys.exit(main(sys.argv))
