#!/usr/bin/env python3
import logging
import sys
from itertools import combinations
from config import configure_logging
from groebner import remainder, s_polynomial
from polynomial_parser import build_system

DEMO = ["x^2 - 2xy + 1", "xy^2 - y + 3/2", "x + y + z"]

def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    configure_logging(logging.DEBUG if "-v" in argv else logging.WARNING)
    exprs = [a for a in argv if a != "-v"] or DEMO
    system = build_system(exprs)
    print("system:")
    for p in system:
        print(" ", system.format(p))
    for (i, p), (j, q) in combinations(enumerate(system), 2):
        s = s_polynomial(p, q)
        r = remainder(s, system.members)
        print(f"S({i}, {j}) = {system.format(s)}")
        print(f"  reduced: {system.format(r.normalize())}")

if __name__ == "__main__":
    main()
