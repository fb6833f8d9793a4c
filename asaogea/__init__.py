"""Engine support toolkit: profiler, resource handles, shared locks, frame timing, jobs, options, input state, camera and shader definitions."""

__version__ = "0.1.0"