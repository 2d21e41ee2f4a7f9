from wordpass.randomness import RandomSource

# A character is considered for replacement when random_int(100) falls below this
SUBSTITUTION_THRESHOLD = 20

# Letters with two look-alikes pick one with a fresh 50/50 draw
SYMBOLS = {
    "a": ("@", "4"),
    "e": ("3",),
    "i": ("!",),
    "s": ("$", "5"),
}

def swap_symbols(text: str, random_source: RandomSource) -> str:
    """
    Replaces roughly one in five of the lowercase a, e, i and s characters
    with a look-alike symbol. Every other character is left alone.
    """
    swapped = []
    for char in text:
        if random_source.random_int(100) >= SUBSTITUTION_THRESHOLD:
            swapped.append(char)
            continue

        options = SYMBOLS.get(char)
        if options is None:
            swapped.append(char)
        elif len(options) == 1:
            swapped.append(options[0])
        else:
            swapped.append(options[random_source.random_int(len(options))])
    return "".join(swapped)
