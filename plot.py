"""Plot spring trajectories for a few presets.

Run with: ``python plot.py``
"""
import sys
from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt

SRC_PATH = Path(__file__).parent / "src"
if SRC_PATH.exists() and str(SRC_PATH) not in sys.path:
    sys.path.append(str(SRC_PATH))

from spring_animation.physics.spring import SpringConfig, SpringValue  # type: ignore

FRAME = 1 / 60
MAX_STEPS = 600


def trajectory(config, start=200.0, target=-200.0):
    """Step a scalar spring at 60 fps until it converges."""
    spring = SpringValue(start, config=config)
    spring.animate_to(target)
    values = [spring.value]
    for _ in range(MAX_STEPS):
        spring.update(FRAME)
        values.append(spring.value)
        if spring.is_done():
            break
    times = np.arange(len(values)) * FRAME
    return times, np.asarray(values)


plt.figure(figsize=(7, 4))
for name in ("smooth", "snappy", "bouncy"):
    times, values = trajectory(SpringConfig.preset(name))
    plt.plot(times, values, label=f"{name} ({len(values) - 1} frames)")
times, values = trajectory(SpringConfig.from_coefficients(stiffness=120, damping=14))
plt.plot(times, values, linestyle="--", label=f"k=120, c=14 ({len(values) - 1} frames)")
plt.axhline(-200, color="gray", linestyle=":", label="Target")
plt.axhline(0, color="gray", linestyle="--")
plt.xlabel("Time (s)")
plt.ylabel("Value")
plt.title("Spring response, semi-implicit Euler at 60 fps")
plt.legend()
plt.grid(True)
plt.show()
