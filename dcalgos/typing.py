from __future__ import generator_stop

from typing import Any

from typing_extensions import Protocol  # typing.Protocol is availalble in Python 3.8+


class Orderable(Protocol):
    def __lt__(self, other: Any) -> bool:
        ...

    def __gt__(self, other: Any) -> bool:
        ...

    def __le__(self, other: Any) -> bool:
        ...

    def __ge__(self, other: Any) -> bool:
        ...
