# example_fibonacci.py
from ycomb_pi import Y, fibonacci, from_numeral, is_even, to_numeral
from ycomb_pi.pretty import pretty_numeral

fact = Y(lambda self: lambda n: 1 if n == 0 else n * self(n - 1))
print("fact(5):", fact(5))

print("is_even(4):", is_even(4), " is_even(7):", is_even(7))

for n in range(8):
    r = fibonacci(to_numeral(n))
    print(f"fib({n}) =", from_numeral(r), " ", pretty_numeral(r, max_apps=8))
