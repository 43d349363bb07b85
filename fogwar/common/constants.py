GRID_WIDTH = 20
GRID_HEIGHT = 20
DEFAULT_DISTANCE_METRIC = "chebyshev"
DISTANCE_METRICS = ("chebyshev", "manhattan", "euclidean")
