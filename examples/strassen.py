import logging
from argparse import ArgumentParser
from random import randint

from dcalgos.matrix import multiply, naive_multiply

parser = ArgumentParser()
parser.add_argument("--size", type=int, default=2, help="Must be a power of two")
parser.add_argument("--parallel", action="store_true")
parser.add_argument("--verbose", action="store_true")
args = parser.parse_args()

logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

if args.size == 2:
    A = [[1, 2], [3, 4]]
    B = [[5, 6], [7, 8]]
else:
    A = [[randint(-9, 9) for _ in range(args.size)] for _ in range(args.size)]
    B = [[randint(-9, 9) for _ in range(args.size)] for _ in range(args.size)]

C = multiply(A, B, args.size, parallel=args.parallel)

for row in C:
    print("\t".join(map(str, row)))

if C != naive_multiply(A, B):
    logging.error("Strassen product differs from the naive product")
