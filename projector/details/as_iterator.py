from typing import Iterator, List, Optional, Set, Tuple, Union


# Make scalar string or container of strings iterable, None yields nothing...
def str_iter(strings: Optional[Union[str, List[str], Set[str], Tuple[str, ...]]]) -> Iterator[str]:
    if strings is None:
        return
    if isinstance(strings, (list, set, tuple)):
        for v in strings:
            if not isinstance(v, str):
                raise TypeError(f"expected str, got {type(v).__name__}: {v!r}")
            yield v
    elif isinstance(strings, str):
        yield strings
    else:
        raise TypeError(f"expected str or collection of str, got {type(strings).__name__}")
