import math


class RealMath:
    """Real functions with IEEE-754 results.

    Python's math module raises ValueError or OverflowError where IEEE-754
    arithmetic produces NaN or an infinity. Bella numbers follow IEEE-754,
    so each function here returns those special values instead.
    """
    pi = math.pi

    def sqrt(self, x: float) -> float:
        if math.isnan(x) or x < 0:
            return math.nan
        return math.sqrt(x)

    def sin(self, x: float) -> float:
        if math.isinf(x) or math.isnan(x):
            return math.nan
        return math.sin(x)

    def cos(self, x: float) -> float:
        if math.isinf(x) or math.isnan(x):
            return math.nan
        return math.cos(x)

    def ln(self, x: float) -> float:
        if math.isnan(x) or x < 0:
            return math.nan
        if x == 0:
            return -math.inf
        return math.log(x)

    def exp(self, x: float) -> float:
        try:
            return math.exp(x)
        except OverflowError:
            return math.inf

    def hypot(self, x: float, y: float) -> float:
        return math.hypot(x, y)

    def remainder(self, x: float, y: float) -> float:
        # Truncated remainder: the result takes the sign of the dividend
        if math.isnan(x) or math.isnan(y) or math.isinf(x) or y == 0:
            return math.nan
        if math.isinf(y):
            return x
        return math.fmod(x, y)

    def power(self, x: float, y: float) -> float:
        if math.isnan(y) or (math.isinf(y) and abs(x) == 1):
            return math.nan
        odd_exponent = y == int(y) and int(y) % 2 == 1 if math.isfinite(y) else False
        try:
            return math.pow(x, y)
        except OverflowError:
            if x < 0 and odd_exponent:
                return -math.inf
            return math.inf
        except ValueError:
            if x == 0:
                # zero base with a negative exponent
                if odd_exponent and math.copysign(1.0, x) < 0:
                    return -math.inf
                return math.inf
            return math.nan
