"""Time Karatsuba against school multiplication to pick a crossover threshold."""

import random
import sys
import timeit

from biguint import DIGIT_MAX, BigUint

THRESHOLDS = [4, 8, 16, 24, 32, 48, 64, 128]


def random_operand(size):
    digits = [random.randint(0, DIGIT_MAX) for _ in range(size - 1)]
    digits.append(random.randint(1, DIGIT_MAX))
    return BigUint.from_digits(digits)


def best_of(stmt, repeat=3):
    return min(timeit.repeat(stmt, number=1, repeat=repeat))


def main(sizes):
    header = "digits  school    " + "  ".join(f"t={t:<6}" for t in THRESHOLDS)
    print(header)
    for size in sizes:
        lhs = random_operand(size)
        rhs = random_operand(size)
        school = best_of(lambda: BigUint.school_multiply(lhs, rhs))
        cells = []
        for threshold in THRESHOLDS:
            elapsed = best_of(lambda: BigUint.karatsuba_multiply(lhs, rhs, threshold))
            cells.append(f"{elapsed / school:8.2f}")
        print(f"{size:<7} {school * 1000:7.2f}ms" + "".join(cells))
    print("Cells are Karatsuba time relative to school; below 1.00 is faster.")


if __name__ == "__main__":
    sizes = [32, 64, 128, 256, 512]
    if len(sys.argv) > 1:
        sizes = [int(arg) for arg in sys.argv[1:]]

    main(sizes)
