from random import randint

from dcalgos.bench import MeasureMemory
from dcalgos.config import settings
from dcalgos.matrix import multiply

conf = settings()

_setup = (
    "from random import randint; from dcalgos.{module} import {func}; "
    "A = [[randint(-9, 9) for _ in range({n})] for _ in range({n})]; "
    "B = [[randint(-9, 9) for _ in range({n})] for _ in range({n})]"
)
_setup_numpy = (
    "import numpy as np; from dcalgos.numpy import strassen; "
    "A = np.random.randint(-9, 10, ({n}, {n})); B = np.random.randint(-9, 10, ({n}, {n}))"
)

benchmarks = {
    "multiply": {
        f"random-{n}": {
            "stmt": f"multiply(A, B, parallel={conf['matrix']['parallel']})",
            "setup": _setup.format(module="matrix", func="multiply", n=n),
            "repeat": conf["repeat"],
            "number": conf["number"],
        }
        for n in conf["matrix"]["sizes"]
    },
    "naive_multiply": {
        f"random-{n}": {
            "stmt": "naive_multiply(A, B)",
            "setup": _setup.format(module="matrix", func="naive_multiply", n=n),
            "repeat": conf["repeat"],
            "number": conf["number"],
        }
        for n in conf["matrix"]["sizes"]
    },
    "strassen_numpy": {
        f"random-{n}": {
            "stmt": "strassen(A, B, leaf_size=16)",
            "setup": _setup_numpy.format(n=n),
            "repeat": conf["repeat"],
            "number": conf["number"],
        }
        for n in conf["matrix"]["sizes"]
    },
}


def measure_memory() -> None:
    for n in conf["matrix"]["sizes"]:
        A = [[randint(-9, 9) for _ in range(n)] for _ in range(n)]
        B = [[randint(-9, 9) for _ in range(n)] for _ in range(n)]
        with MeasureMemory() as m:
            C = multiply(A, B)
        m.print(f"multiply-{n}")
        del C


if __name__ == "__main__":
    from dcalgos.benchmarks import run

    run(benchmarks)
    measure_memory()
