"""Quickstart example for i18nstore.

This example demonstrates registering component defaults, merging a
runtime bundle, and reading with locale fallback.

Note: The remote bundle is served by an in-process httpx.MockTransport so the
example runs offline. In production, construct ResourceStore() without a
fetcher and load() performs real HTTP requests.
"""

import asyncio
import json

import httpx

from i18nstore import HttpJSONFetcher, ResourceStore, TransportError

BUNDLES = {
    "/i18n/lv.json": {"buttons": {"save": "Saglabāt"}, "dialog": {"title": "Iestatījumi"}},
}


def serve(request: httpx.Request) -> httpx.Response:
    if request.url.path in BUNDLES:
        return httpx.Response(200, json=BUNDLES[request.url.path])
    return httpx.Response(404)


async def main() -> None:
    fetcher = HttpJSONFetcher(transport=httpx.MockTransport(serve))

    with ResourceStore(locale="lv", fetcher=fetcher) as store:
        # Example 1: Component defaults (registered under "en-us")
        print("=" * 50)
        print("Example 1: Component Defaults")
        print("=" * 50)

        store.store("buttons", {"save": "Save", "cancel": "Cancel"})
        store.store("buttons", {"save": "Save", "cancel": "Atcelt"}, locale="lv")
        print(store.get("buttons.cancel"))
        # Output: Atcelt
        print(store.get("buttons.save", locale="EN-US"))
        # Output: Save

        # Example 2: Merge a runtime bundle
        print("\n" + "=" * 50)
        print("Example 2: Runtime Bundle")
        print("=" * 50)

        await store.load("https://cdn.example.com/i18n/lv.json", "lv")
        print(store.get("buttons"))
        # Output: {'save': 'Saglabāt', 'cancel': 'Atcelt'}

        # Example 3: Failed loads leave the store unchanged
        print("\n" + "=" * 50)
        print("Example 3: Failed Load")
        print("=" * 50)

        before = store.to_json()
        try:
            await store.load("https://cdn.example.com/i18n/de.json", "de")
        except TransportError as e:
            print(f"Load failed (HTTP {e.status_code})")
        print(store.to_json() == before)
        # Output: True

        print(store.get_load_summary())
        print(json.dumps(store.to_json(), ensure_ascii=False, indent=2))


if __name__ == "__main__":
    asyncio.run(main())
