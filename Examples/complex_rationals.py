import rationals as rn
from rationals import Complex, Rational


def main():
    r1 = Rational(Complex(1, 2), Complex(5, 4))
    r2 = Rational(Complex(1, 0), Complex.i())

    print(f"{r1} + {r2} = {r1 + r2}")
    print(f"reduced: {rn.complex_of_rational(r1 + r2)}")

    z = Complex(Rational(1, 2), Rational(2))
    print(f"{z} = {z.evaluate()}")


if __name__ == "__main__":
    main()
