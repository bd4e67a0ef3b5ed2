import numpy as np

import rationals as rn


def main():
    vec = rn.as_rational_array([rn.Rational(1, 2), rn.Rational(2, 3), rn.Rational(3, 4)])
    q = rn.as_rational_array([rn.Rational(3, 5), rn.Rational(1, 2), rn.Rational(0)])

    print(f"[{', '.join(map(str, vec))}] + [{', '.join(map(str, q))}] = "
          f"[{', '.join(map(str, vec + q))}]")
    print(f"as float64: {rn.evaluate_array(vec + q)}")
    print(f"as float32: {rn.evaluate_array(vec + q, np.float32)}")


if __name__ == "__main__":
    main()
