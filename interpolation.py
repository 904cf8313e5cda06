#interpolation.py

def lerp(a, b, t):
    "Linear interpolation."
    return a * (1 - t) + b * t

def fade(t):
    "6t^5 - 15t^4 + 10t^3"
    return t * t * t * (t * (t * 6 - 15) + 10)
