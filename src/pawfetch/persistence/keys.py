def favorite_key(category: str, identifier: object) -> str:
    return f"favorite-{category}-{identifier}"
