import pytest

from spring_animation.animation.registry import AnimationRegistry
from spring_animation.physics.exact import ExactSpringValue, response_coefficients
from spring_animation.physics.spring import SpringConfig, SpringValue
from spring_animation.physics.vector import Point

FRAME = 1 / 60


@pytest.mark.parametrize("damping_ratio", [0.3, 0.825, 1.0, 2.0])
def test_exact_response_matches_finely_stepped_integrator(damping_ratio):
    config = SpringConfig(duration=0.5, damping_ratio=damping_ratio)
    exact = ExactSpringValue(1.0, config=config)
    stepped = SpringValue(1.0, config=config)
    exact.animate_to(0.0)
    stepped.animate_to(0.0)
    for _ in range(5):
        for _ in range(1000):
            stepped.update(1e-4)
        exact.update(0.1)
        assert exact.value == pytest.approx(stepped.value, abs=1e-2)
        assert exact.velocity == pytest.approx(stepped.velocity, abs=1e-1)


def test_coefficients_start_from_the_initial_state():
    for damping in (5.0, 2.0 * 10.0, 40.0):
        assert response_coefficients(100.0, damping, 0.0) == pytest.approx((1.0, 0.0, 0.0, 1.0))


def test_result_does_not_depend_on_frame_size():
    config = SpringConfig.from_coefficients(120.0, 14.0)
    coarse = ExactSpringValue(200.0, config=config)
    fine = ExactSpringValue(200.0, config=config)
    coarse.animate_to(-200.0)
    fine.animate_to(-200.0)
    coarse.update(0.3)
    for _ in range(18):
        fine.update(FRAME)
    assert coarse.value == pytest.approx(fine.value)
    assert coarse.velocity == pytest.approx(fine.velocity)


def test_one_long_pause_lands_on_target():
    spring = ExactSpringValue(Point(100.0, 200.0))
    spring.animate_to(Point(50.0, -200.0))
    spring.update(30.0)
    assert spring.value.x == pytest.approx(50.0, abs=1e-6)
    assert spring.value.y == pytest.approx(-200.0, abs=1e-6)
    assert spring.is_done()


def test_retarget_continues_from_current_motion():
    spring = ExactSpringValue(200.0, config=SpringConfig.from_coefficients(120.0, 14.0))
    spring.animate_to(-200.0)
    for _ in range(10):
        spring.update(FRAME)
    value = spring.value
    velocity = spring.velocity
    spring.animate_to(500.0)
    assert spring.value == value
    assert spring.velocity == velocity
    spring.update(1e-6)
    assert spring.value == pytest.approx(value + velocity * 1e-6, abs=1e-6)
    assert spring.velocity == pytest.approx(velocity, abs=1.0)


def test_snap_to_restarts_at_rest():
    spring = ExactSpringValue(0.0)
    spring.animate_to(10.0)
    spring.update(FRAME)
    spring.snap_to(3.0)
    spring.update(1.0)
    assert (spring.value, spring.target, spring.velocity) == (3.0, 3.0, 0.0)


def test_mismatched_target_is_rejected():
    spring = ExactSpringValue(Point(1.0, 1.0))
    with pytest.raises(TypeError):
        spring.animate_to(2.0)
    spring.update(FRAME)
    assert spring.value == Point(1.0, 1.0)


def test_exact_spring_is_retired_by_the_registry():
    registry = AnimationRegistry()
    spring = ExactSpringValue(0.0, registry=registry)
    spring.animate_to(1.0)
    assert spring.id in registry
    for _ in range(600):
        if registry.is_idle():
            break
        registry.advance(FRAME)
    assert registry.is_idle()
    assert spring.value == pytest.approx(1.0, abs=0.03)
