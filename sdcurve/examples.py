import pandas as pd


def market_examples():
    """Ready-made markets, each a list of curve tables ordered supply, demand, supply, demand, ..."""
    return {
        "Single market (S: y=x, D: y=9-x)": [
            pd.DataFrame({"x": [1, 9], "y": [1, 9]}),
            pd.DataFrame({"x": [7, 2], "y": [2, 7]}),
        ],
        "Supply and demand shift right": [
            pd.DataFrame({"x": [1, 9], "y": [1, 9]}),
            pd.DataFrame({"x": [7, 2], "y": [2, 7]}),
            pd.DataFrame({"x": [2, 10], "y": [1, 9]}),
            pd.DataFrame({"x": [8, 2], "y": [2, 8]}),
        ],
        "Kinked supply (capacity limit at Q=6)": [
            pd.DataFrame({"x": [0, 6, 6.5], "y": [1, 4, 9]}),
            pd.DataFrame({"x": [1, 8], "y": [8, 1]}),
        ],
    }
