"""CPU path tracer with a thin-lens camera and scanline-parallel rendering.

Renders scenes of spheres, square patches and oriented boxes with
Lambertian, metal and dielectric materials using Monte Carlo path tracing.
Every scanline draws from its own seeded random generator, so rows can be
rendered in parallel processes and still reproduce bit-identical images.

Subpackages:
    core: Vector algebra, rays, the integrator and the render driver
    geometry: Shape primitives and intersection algorithms
    materials: Scattering models
    scene: Scene container, builder and preset scenes
    camera: Thin-lens camera with ray generation
    preview: Image export (PPM, PNG)
"""

__version__ = "0.1.0"
