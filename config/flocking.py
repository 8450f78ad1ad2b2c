"""Configuration for the 3D bird flocking simulation."""

WINDOW = {
    "width": 1024,
    "height": 1024,
    "title": "Bird Flocking Simulation"
}

CAMERA = {
    "fov": 60.0,
    "near_clip": 0.1,
    "far_clip": 100.0,
    "initial_radius": 17.5,    # POV distance from the origin
    "initial_theta": 90.0,     # Looking down the -z axis
    "initial_phi": 0.0,
    "min_radius": 2.0,
    "max_radius": 60.0,
    "min_phi": -89.0,
    "max_phi": 89.0,
    "keyboard_rotate_speed": 60.0,
    "keyboard_zoom_speed": 10.0,
    "mouse_sensitivity": 0.3
}

GRID = {
    "color": (0.2, 0.2, 0.25)
}

FLOCK = {
    "count": 10000,
    "dimensions": 7.5,           # Domain is [-dimensions, dimensions]^3
    "seed": None,                # None draws a fresh population every run

    # Flocking behavior
    "separation_weight": 1.5,    # flock tightness
    "alignment_weight": 2.0,     # movement coordination
    "cohesion_weight": 1.5,      # flock unification
    "perception_radius": 1.9,    # flock size
    "max_speed": 0.125,
    "max_force": 0.03,           # sharpness of movement
    "size": 0.05,                # Triangle half-width when rendered
}

ENGINE = {
    "scheduler": "threads",      # threads | numba | serial
    "partitioning": "contiguous",  # contiguous | interleaved
    "workers": None,             # None uses os.cpu_count()
    "step_timeout": 5.0,         # Seconds to wait for a step before giving up on it
}

STATS = {
    "show_times": True,
    "show_positions": False,
    "print_every": False,        # Print a batch line every report_every steps
    "report_every": 100,
    "summary_every": 1000,
    "exit_after_summary": True,
}

COLORS = {
    "background": (0.0, 0.0, 0.0, 1.0),
    "near": (1.0, 1.0, 1.0),     # white when close
    "far": (1.0, 0.2, 0.2),      # red when far
    "text": (0.9, 0.9, 0.9)
}
