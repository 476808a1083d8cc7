"""
Basic tests for the vibrating string simulation

Checks the per-point recurrence, boundary pinning and both solver
backends on the Warp CPU device.

Run with pytest, or directly:
    python test_basic.py
"""

import numpy as np
import warp as wp

from vibrating_string import Model, SolverPointwise, SolverReference, simulate
from vibrating_string.solvers.reference import initial_displacements


DEVICE = "cpu"


def test_model_allocation():
    """Results buffer is padded and zero-filled"""
    print("Test 1: Model allocation... ", end="")
    model = Model(tpoints=20, device=DEVICE)
    state = model.state()

    assert state.tpoints == 20
    assert state.values.shape == (22,), f"Expected (22,), got {state.values.shape}"
    assert np.all(state.values.numpy() == 0.0)
    assert np.isclose(model.tau, 0.3)
    assert np.isclose(model.sqtau, 0.09)
    print("✓ PASSED")


def test_model_rejects_small_string():
    """Point count below 20 is rejected"""
    print("Test 2: Invalid point count... ", end="")
    for tpoints in (0, 19, 1_000_001):
        try:
            Model(tpoints=tpoints, device=DEVICE)
        except ValueError:
            continue
        raise AssertionError(f"Model accepted tpoints={tpoints}")
    print("✓ PASSED")


def test_solver_rejects_bad_steps():
    """Step count outside [1, 1000000] is rejected"""
    print("Test 3: Invalid step count... ", end="")
    model = Model(tpoints=20, device=DEVICE)
    for solver in (SolverPointwise(model), SolverReference(model)):
        for nsteps in (0, -1, 1_000_001):
            try:
                solver.solve(model.state(), nsteps)
            except ValueError:
                continue
            raise AssertionError(f"{type(solver).__name__} accepted nsteps={nsteps}")
    print("✓ PASSED")


def test_boundaries_pinned():
    """Both endpoints are zero after any number of steps"""
    print("Test 4: Boundary pinning... ", end="")
    for tpoints, nsteps in [(20, 1), (20, 7), (33, 250), (100, 1000)]:
        values = simulate(tpoints, nsteps, device=DEVICE)
        assert values.shape == (tpoints,)
        assert values[0] == 0.0, f"Point 1 not pinned: {values[0]}"
        assert values[-1] == 0.0, f"Point {tpoints} not pinned: {values[-1]}"
    print("✓ PASSED")


def test_padding_untouched():
    """Slots 0 and tpoints + 1 are never written"""
    print("Test 5: Padding slots... ", end="")
    model = Model(tpoints=25, device=DEVICE)
    for solver_cls in (SolverPointwise, SolverReference):
        state = model.state()
        solver_cls(model).solve(state, 10)
        buffer = state.values.numpy()
        assert buffer[0] == 0.0
        assert buffer[26] == 0.0
        assert np.any(buffer[2:25] != 0.0)
    print("✓ PASSED")


def test_single_step_hand_computed():
    """tpoints=20, nsteps=1 matches one recurrence step on the sine profile"""
    print("Test 6: Single step value... ", end="")
    values = simulate(20, 1, device=DEVICE)

    # now = sin(2*pi/19) ~ 0.3247, next = (1 - 2 * 0.09) * now ~ 0.2663
    expected = 0.82 * np.sin(2.0 * np.pi / 19.0)
    assert np.isclose(values[1], expected, atol=1e-5), f"Expected {expected}, got {values[1]}"
    assert np.isclose(values[1], 0.2663, atol=1e-4)

    # Every interior point is scaled the same way after one step
    x = np.arange(20) / 19.0
    interior = 0.82 * np.sin(2.0 * np.pi * x[1:-1])
    assert np.allclose(values[1:-1], interior, atol=1e-5)
    print("✓ PASSED")


def test_bounded_long_run():
    """tpoints=20, nsteps=1000 stays finite and bounded"""
    print("Test 7: Long run boundedness... ", end="")
    values = simulate(20, 1000, device=DEVICE, check_finite=True)
    assert np.all(np.isfinite(values))
    # |2 - 2 tau^2| < 2, so the recurrence oscillates without growing
    assert np.max(np.abs(values)) < 5.0
    print("✓ PASSED")


def test_deterministic():
    """Identical runs give bit-identical output"""
    print("Test 8: Determinism... ", end="")
    a = simulate(57, 333, device=DEVICE)
    b = simulate(57, 333, device=DEVICE)
    assert np.array_equal(a, b)
    print("✓ PASSED")


def test_scaling_invariance():
    """Same position under different point counts follows the same trajectory"""
    print("Test 9: Scaling invariance... ", end="")
    coarse = simulate(20, 123, device=DEVICE)
    fine = simulate(39, 123, device=DEVICE)

    # Point k of 20 sits at (k-1)/19, point 2k-1 of 39 at (2k-2)/38
    assert np.array_equal(coarse, fine[::2])
    print("✓ PASSED")


def test_initialization_idempotent():
    """Initial profile is a pure function of (idx, tpoints)"""
    print("Test 10: Initialization... ", end="")
    first = initial_displacements(20)
    second = initial_displacements(20)
    assert np.array_equal(first, second)
    assert first.dtype == np.float32

    expected = np.sin(2.0 * np.pi * np.arange(20) / 19.0)
    assert np.allclose(first, expected, atol=1e-6)
    print("✓ PASSED")


def test_backends_agree():
    """Warp kernel and numpy reference give the same profile"""
    print("Test 11: Backend agreement... ", end="")
    for tpoints, nsteps in [(20, 1), (64, 100)]:
        kernel = simulate(tpoints, nsteps, device=DEVICE, backend="warp")
        reference = simulate(tpoints, nsteps, device=DEVICE, backend="numpy")
        assert np.allclose(kernel, reference, atol=1e-4), \
            f"Max diff {np.max(np.abs(kernel - reference))}"
    print("✓ PASSED")


def test_unknown_backend():
    """Unknown backend names are rejected"""
    print("Test 12: Unknown backend... ", end="")
    try:
        simulate(20, 1, device=DEVICE, backend="opencl")
    except ValueError:
        print("✓ PASSED")
        return
    raise AssertionError("simulate accepted backend='opencl'")


def test_finite_check():
    """check_finite reports NaN displacements with their point index"""
    print("Test 13: Finite check... ", end="")
    model = Model(tpoints=20, device=DEVICE)
    solver = SolverPointwise(model, check_finite=True)
    state = model.state()

    padded = np.zeros(22, dtype=np.float32)
    padded[5] = np.nan
    state.values = wp.array(padded, dtype=wp.float32, device=DEVICE)

    try:
        solver._verify_finite(state)
    except FloatingPointError as e:
        assert "point 5" in str(e), str(e)
        print("✓ PASSED")
        return
    raise AssertionError("NaN displacement was not reported")


def test_rejects_non_integer_counts():
    """Fractional point and step counts are rejected, not truncated"""
    print("Test 14: Non-integer counts... ", end="")
    for tpoints in (20.5, 20.0, "20", True):
        try:
            Model(tpoints=tpoints, device=DEVICE)
        except ValueError:
            continue
        raise AssertionError(f"Model accepted tpoints={tpoints!r}")

    model = Model(tpoints=np.int64(20), device=DEVICE)
    assert model.tpoints == 20 and type(model.tpoints) is int

    for solver in (SolverPointwise(model), SolverReference(model)):
        for nsteps in (2.7, 3.0):
            try:
                solver.solve(model.state(), nsteps)
            except ValueError:
                continue
            raise AssertionError(f"{type(solver).__name__} accepted nsteps={nsteps!r}")
    print("✓ PASSED")


def test_solver_device():
    """Solvers run on the device of their model"""
    print("Test 15: Solver device... ", end="")
    model = Model(tpoints=20, device=DEVICE)
    solver = SolverPointwise(model)
    assert solver.device == model.device
    assert solver.device.is_cpu

    state = solver.solve(model.state(), 1)
    assert state.values.device == solver.device
    print("✓ PASSED")


def main():
    """Run all tests"""
    print("=" * 60)
    print("Running Basic Tests for vibrating_string")
    print("=" * 60)
    print()

    wp.init()

    tests = [
        test_model_allocation,
        test_model_rejects_small_string,
        test_solver_rejects_bad_steps,
        test_boundaries_pinned,
        test_padding_untouched,
        test_single_step_hand_computed,
        test_bounded_long_run,
        test_deterministic,
        test_scaling_invariance,
        test_initialization_idempotent,
        test_backends_agree,
        test_unknown_backend,
        test_finite_check,
        test_rejects_non_integer_counts,
        test_solver_device,
    ]

    results = []
    for test in tests:
        try:
            test()
            results.append(True)
        except AssertionError as e:
            print(f"✗ FAILED: {e}")
            results.append(False)
        print()

    # Summary
    print("=" * 60)
    passed = sum(results)
    total = len(results)
    print(f"Results: {passed}/{total} tests passed")

    if passed == total:
        print("✓ All tests passed!")
    else:
        print(f"✗ {total - passed} test(s) failed")

    print("=" * 60)

    return passed == total


if __name__ == "__main__":
    success = main()
    exit(0 if success else 1)
