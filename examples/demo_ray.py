# examples/demo_ray.py
import numpy as np

from trigeom import Point, Triangle

if __name__ == "__main__":
    tri = Triangle(
        Point.of(0, 0, 0, dtype=np.float32),
        Point.of(1, 0, 0, dtype=np.float32),
        Point.of(0, 1, 0, dtype=np.float32),
    )
    n = tri.normal()
    origin = tri.centroid() + n * 5
    hit = tri.ray_hit(origin, -n)
    print("hit:", hit)
    print("hit point:", hit.point(origin, -n))
    print("parallel ray:", tri.ray_intersection(origin, Point(1, 0, 0)))
