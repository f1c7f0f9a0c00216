import hmac


def constant_time_equals(presented: str, expected: str) -> bool:
    """Karşılaştırma süresi ilk farklı karaktere bağlı değildir."""
    return hmac.compare_digest(presented.encode("utf-8"), expected.encode("utf-8"))
