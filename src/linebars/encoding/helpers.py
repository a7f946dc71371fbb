from itertools import chain


def join_slices(*slices):
    """Concatenates bit slices into one list, keeping their order"""
    return list(chain.from_iterable(slices))


def runs(modules):
    """Groups modules into bars and spaces

    :param modules:         Iterable of bits
    :return:                Yields (bit, width) for every run of equal bits"""
    prev = None
    width = 0
    for bit in modules:
        if bit == prev:
            width += 1
            continue
        if prev is not None:
            yield prev, width
        prev = bit
        width = 1
    if prev is not None:
        yield prev, width
