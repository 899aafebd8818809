"""
Load state-defined standard overrides into the override store.

Usage: python scripts/seed_state_overrides.py overrides.json

The file holds a JSON list of objects with state, subject,
replaces_standard_id, new_standard_id and description.
"""

import asyncio
import os
import json
import sys

# Add project root to path so we can import src
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
from pydantic import ValidationError

from src.schemas.standards import StateOverrideCreate
from src.standards.errors import StoreUnavailableError
from src.store import OverrideStore, build_override_store

load_dotenv()


async def seed(path: str, store: OverrideStore | None = None) -> int:
    with open(path, "r", encoding="utf-8") as f:
        payload = json.load(f)

    drafts = [StateOverrideCreate(**item) for item in payload]
    store = store or build_override_store()
    for draft in drafts:
        record = await store.insert_state_override(draft)
        print(f"✅ {record.state} {record.subject}: {record.replaces_standard_id} -> {record.new_standard_id}")
    return len(drafts)


def main():
    if len(sys.argv) != 2:
        print("Usage: python scripts/seed_state_overrides.py <overrides.json>")
        sys.exit(1)

    try:
        count = asyncio.run(seed(sys.argv[1]))
    except (ValidationError, json.JSONDecodeError) as e:
        print(f"❌ Invalid override file: {e}")
        sys.exit(1)
    except StoreUnavailableError as e:
        print(f"❌ Store unavailable: {e}")
        sys.exit(1)

    print(f"Seeded {count} state overrides.")


if __name__ == "__main__":
    main()
