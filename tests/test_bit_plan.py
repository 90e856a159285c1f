from quantum_lottery.services.bit_plan import BitPlan, bytes_for_bits, plan_bits
from quantum_lottery.services.combinatorics import count_combinations


def test_plan_for_six_of_fifty_nine():
    plan = plan_bits(45_057_474)
    assert plan == BitPlan(bits_needed=26, bytes_needed=4)
    assert plan.random_number_max == 67_108_864
    assert plan.overlap(45_057_474) == 22_051_390


def test_plan_is_minimal():
    for combinations in range(1, 600):
        plan = plan_bits(combinations)
        b = plan.bits_needed
        assert 2**b >= combinations
        if b > 0:
            assert 2 ** (b - 1) < combinations, combinations


def test_plan_exact_powers_of_two():
    assert plan_bits(2).bits_needed == 1
    assert plan_bits(256) == BitPlan(bits_needed=8, bytes_needed=1)
    assert plan_bits(257) == BitPlan(bits_needed=9, bytes_needed=2)


def test_plan_for_huge_counts():
    combinations = count_combinations(500, 1000)
    plan = plan_bits(combinations)
    assert plan.bits_needed == (combinations - 1).bit_length()
    assert plan.bytes_needed == (plan.bits_needed + 7) // 8


def test_single_combination_needs_no_randomness():
    for combinations in (0, 1):
        plan = plan_bits(combinations)
        assert plan.bits_needed == 0
        assert plan.bytes_needed == 0
        assert plan.random_number_max == 1


def test_bytes_for_bits():
    assert bytes_for_bits(0) == 0
    assert bytes_for_bits(1) == 1
    assert bytes_for_bits(8) == 1
    assert bytes_for_bits(9) == 2
    assert bytes_for_bits(26) == 4
