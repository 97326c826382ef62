from trigeom import Point, Triangle, configure_logging

if __name__ == "__main__":
    configure_logging("DEBUG")

    tri = Triangle(Point(0, 0, 0), Point(3, 0, 0), Point(0, 4, 0))
    print("sides:", tri.sides())
    print("area (Heron / cross):", tri.area(), tri.area_cross())
    print("angles:", tri.angles())
    print("circumradius / inradius:", tri.circumradius(), tri.inradius())
    print("normal:", tri.normal())
    print("aabb:", tri.aabb())
    print("right / isosceles:", tri.is_right(), tri.is_isosceles())

    bary = tri.cartesian_to_barycentric(Point(1, 1, 0))
    print("barycentric (1,1,0):", bary, "->", tri.barycentric_to_cartesian(bary))

    flat = Triangle(Point(1, 2, -3), Point(1, 2, 0), Point(1, 2, 19))
    print("collinear:", flat.is_collinear(), "angles:", flat.angles())
