from abc import ABC, abstractmethod


class Plugin(ABC):
    @abstractmethod
    def name(self) -> str: ...


class CorePlugin(Plugin):
    def name(self) -> str:
        return "core"
