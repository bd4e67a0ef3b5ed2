import numpy as np

import rationals as rn
from rationals import Complex, Rational


def main():
    mat = np.empty((2, 2), dtype=object)
    mat[0, 0] = Complex.one(Rational)
    mat[0, 1] = Complex.zero(Rational)
    mat[1, 0] = Complex.i(Rational)
    mat[1, 1] = Complex(Rational(1, 3), Rational(1, 4))

    vec = np.empty(2, dtype=object)
    vec[0] = Complex.one(Rational)
    vec[1] = Complex.i(Rational)

    product = mat @ vec
    print(f"{mat} * {vec} = {product}")
    print(f"evaluated: {rn.evaluate_array(product, np.complex128)}")


if __name__ == "__main__":
    main()
