"""connectgrid — greedy multi-walker wire routing on a 2-D grid."""

__version__ = "0.1.0"
