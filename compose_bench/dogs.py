# Dogs: five ways to build something that barks
# Closures vs classes, composition vs plain attributes, bound vs unbound

from types import MethodType, SimpleNamespace
from typing import Protocol

DEFAULT_NAME = "blah blah"


class Announcer(Protocol):
    """Anything with a ``bark()`` that returns a name."""

    def bark(self): ...


def barkable(state):
    """Closure helper: barks whatever ``state["name"]`` holds."""
    return SimpleNamespace(bark=lambda: state["name"])


def create_dog(name=DEFAULT_NAME):
    state = {"name": name}
    barker = barkable(state)
    return SimpleNamespace(bark=barker.bark)


class Barker:
    def __init__(self, name):
        self.name = name

    def bark(self):
        return self.name


class DogWithComposition:
    """Has-a Barker and forwards to it."""

    def __init__(self, name=DEFAULT_NAME):
        self.name = name
        self.barker: Announcer = Barker(name)

    def bark(self):
        return self.barker.bark()


class DogWithIdentityIssues:
    """A class holding a closure-based barker."""

    def __init__(self, name=DEFAULT_NAME):
        self.name = name
        self.barker: Announcer = barkable({"name": name})

    def bark(self):
        return self.barker.bark()


class DogWithProto:
    def __init__(self, name=DEFAULT_NAME):
        self.name = name

    def bark(self):
        return self.name


class DogWithProtoWithBind:
    def __init__(self, name=DEFAULT_NAME):
        self.name = name
        # instance attribute shadows the class method
        self.bark = MethodType(type(self).bark, self)

    def bark(self):
        return self.name


# Benchmark labels, in run order
STRATEGIES = {
    "Closure": create_dog,
    "Class with composition": DogWithComposition,
    "Class + Closure": DogWithIdentityIssues,
    "Good old classes, who needs composition": DogWithProto,
    "Good old classes, but we gotta use bind": DogWithProtoWithBind,
}
