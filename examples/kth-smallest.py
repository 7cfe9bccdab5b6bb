import logging
from argparse import ArgumentParser

from dcalgos.algorithms import kth_smallest
from dcalgos.exceptions import InvalidRank

parser = ArgumentParser()
parser.add_argument("k", type=int, nargs="?", default=5, help="1-based rank")
parser.add_argument("--values", type=int, nargs="+", default=[25, 21, 98, 100, 76, 22, 43, 60, 89, 42])
args = parser.parse_args()

logging.basicConfig(level=logging.INFO)

print("Values:", " ".join(map(str, args.values)))

try:
    result = kth_smallest(args.values, args.k)
except InvalidRank as e:
    logging.error("Cannot select: %s", e)
else:
    print(f"The {args.k}-th smallest value is {result}")
