from abc import ABC, abstractmethod
from typing import Protocol

from classwire import Marker


class ExampleMarker(Marker):
    pass


class UnusedMarker(Marker):
    pass


class IFace(Protocol):
    def handle(self) -> str: ...


class Base(IFace):
    @abstractmethod
    def handle(self) -> str: ...


class Super1(Base):
    def handle(self) -> str:
        return "super1"


class Super2(Base):
    def handle(self) -> str:
        return "super2"


class Plain:
    pass


@ExampleMarker()
class MarkedService:
    pass


@ExampleMarker()
class MarkedAbstract(ABC):
    @abstractmethod
    def run(self) -> str: ...


@ExampleMarker()
class MarkedInterface(Protocol):
    def run(self) -> str: ...


class MarkedChild(MarkedAbstract):
    def run(self) -> str:
        return "child"
