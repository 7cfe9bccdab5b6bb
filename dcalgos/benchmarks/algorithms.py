from dcalgos.config import settings

conf = settings()

_setup = "from random import sample; from dcalgos.algorithms import {func}; seq = sample(range({n} * 10), {n})"

benchmarks = {
    "select": {
        f"random-{n}": {
            "stmt": "select(list(seq), 0, len(seq) - 1, len(seq) // 2)",
            "setup": _setup.format(func="select", n=n),
            "repeat": conf["repeat"],
            "number": conf["number"],
        }
        for n in conf["selection"]["sizes"]
    },
    "median": {
        f"random-{n}": {
            "stmt": "median(seq)",
            "setup": _setup.format(func="median", n=n),
            "repeat": conf["repeat"],
            "number": conf["number"],
        }
        for n in conf["selection"]["sizes"]
    },
    "sorted": {
        f"random-{n}": {
            "stmt": "sorted(seq)[len(seq) // 2]",
            "setup": f"from random import sample; seq = sample(range({n} * 10), {n})",
            "repeat": conf["repeat"],
            "number": conf["number"],
        }
        for n in conf["selection"]["sizes"]
    },
}

if __name__ == "__main__":
    from dcalgos.benchmarks import run

    run(benchmarks)
