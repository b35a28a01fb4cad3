from datetime import datetime, timezone


def utc_now() -> datetime:
    # Python-side defaults: values are known after flush, no refresh needed under asyncio
    return datetime.now(timezone.utc)
