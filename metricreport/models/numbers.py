def parse_number(text: str) -> float:
    """float() without the digit-grouping underscores Python literals allow."""
    if "_" in text:
        raise ValueError(f"could not convert string to float: {text!r}")
    return float(text)
