"""Configuration for the 3D amber flock animation."""

WINDOW = {
    "width": 1280,
    "height": 720,
    "title": "Amber Flock",
    "resizable": True
}

CAMERA = {
    "fov": 75.0,
    "near_clip": 0.1,
    "far_clip": 1000.0,
    "position": (0.0, 0.0, 12.0),
    "target": (0.0, 0.0, 0.0),
    "pointer_plane_z": 0.0      # Mouse is projected onto this depth plane
}

FLOCK = {
    "count": 80,
    "seed": None,               # None draws fresh entropy on every start
    "update_mode": "sequential",  # or "synchronous" (double-buffered)

    # Neighbourhood (squared distances)
    "perception_radius_sq": 16.0,
    "close_radius_sq": 2.0,
    "separation_epsilon": 0.1,  # Distance floor for the inverse-distance push

    # Steering
    "steer_gain": 0.05,
    "separation_scale": 0.1,
    "separation_weight": 3.5,   # Keep them apart
    "alignment_weight": 0.2,    # Less marching in formation
    "cohesion_weight": 0.1,     # Less balling up

    # Speed (world units per frame)
    "initial_speed": 0.05,
    "min_speed": 0.03,
    "max_speed": 0.1,

    # Spawn box extents, centred on the origin
    "spawn_extents": (25.0, 15.0, 10.0),
}

POINTER = {
    "radius_sq": 64.0,
    "gain": 50.0,
    "epsilon": 0.1,
    "predator": 80.0,
    "predator_scale": 0.002
}

BOUNDARY = {
    "outer_radius": 18.0,
    "outer_gain": 0.005,
    "depth_limit": 4.0,
    "depth_gain": 0.02          # Strong pull back to z=0
}

BIRD = {
    "body_radius": 0.06,
    "body_length": 0.3,
    "body_segments": 8,
    "wing_pivot": (0.02, 0.02, 0.0),
    "wing_shape": ((0.0, 0.0), (0.4, 0.0), (0.1, -0.2), (0.0, -0.1)),
    "flap_base": 0.005,         # Radians per millisecond at rest
    "flap_speed_gain": 0.1,     # Faster birds flap faster
    "flap_amplitude": 0.5
}

COLORS = {
    "background": (0.0, 0.0, 0.0, 0.0),
    "palette": ((0xd9, 0x77, 0x06), (0x92, 0x40, 0x0e)),  # Amber, dark orange
    "ambient_light": 0.7,
    "directional_light": 0.8,
    "light_position": (5.0, 10.0, 7.0, 0.0),
    "text": (230, 230, 230)
}
