from __future__ import generator_stop

import logging
from argparse import ArgumentParser
from timeit import repeat
from typing import Any, Dict


def run(benchmarks: Dict[str, Dict[str, Dict[str, Any]]]) -> None:

    parser = ArgumentParser()
    parser.add_argument("testcases", nargs="*")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.testcases:
        for funcname in args.testcases:
            if "." in funcname:
                funcname, benchname = funcname.split(".")
                kwargs = benchmarks[funcname][benchname]
                print(funcname, benchname, min(repeat(**kwargs)))

            else:
                benchs = benchmarks[funcname]
                for benchname, kwargs in benchs.items():
                    print(funcname, benchname, min(repeat(**kwargs)))

    else:
        for funcname, benchs in benchmarks.items():
            for benchname, kwargs in benchs.items():
                print(funcname, benchname, min(repeat(**kwargs)))
