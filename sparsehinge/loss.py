# encoding: utf-8
# Author: Kyohei Atarashi
# License: MIT

from numba.experimental import jitclass


@jitclass([])
class Hinge(object):
    """Hinge loss: L(p, y) = max(1 - yp, 0), y in {-1, +1}"""

    def __init__(self):
        pass

    def loss(self, p, y):
        z = 1.0 - p * y
        if z > 0:
            return z
        return 0.0

    def dloss(self, p, y):
        z = 1.0 - p * y
        if z > 0:
            return -y
        return 0.0
