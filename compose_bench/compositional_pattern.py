#!/usr/bin/env python3
# Benchmark: Composing objects, closures vs classes
# Tests: Construction + one method call per object, 1000 objects per op

from compose_bench.dogs import STRATEGIES
from compose_bench.suite import Suite

ITERATIONS = 1000


def make_loop(construct):
    """Build ITERATIONS dogs with ``construct`` and make each one bark once."""
    def loop():
        for i in range(ITERATIONS):
            dog = construct(i)
            what_did_the_dog_say = dog.bark()
    return loop


def build_suite():
    suite = Suite()
    for label, construct in STRATEGIES.items():
        suite.add(label, make_loop(construct))
    return suite


def main():
    (build_suite()
        .on("cycle", lambda bench: print(str(bench), flush=True))
        .on("complete", lambda suite: print(f"Fastest is {suite.fastest().name}"))
        .run())


if __name__ == "__main__":
    main()
