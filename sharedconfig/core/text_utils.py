def pluralize(name: str, count: int, plural: str = "") -> str:
    if count == 1:
        return name
    return plural or f"{name}s"
