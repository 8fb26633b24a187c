import random

import pytest

from heprecord import EventRecord, Particle, Status
from heprecord.genealogy import DaughterListCompactor
from heprecord.sequence import ParticleSequence

INIT = Status.INITIAL_STATE
FINAL = Status.STABLE_FINAL_STATE


def _layout(record):
    return [(p.px, p.mother1, p.daughter1, p.daughter2) for p in record]


def test_first_daughter_sets_single_slot_range(build_record):
    record = build_record([-1, 0])
    assert (record[0].daughter1, record[0].daughter2) == (1, 1)
    assert record.n_compactions == 0


def test_adjacent_daughters_take_the_cheap_path(build_record, check_genealogy):
    # Scenario: 0 (no mother), 1 (mother 0), 2 (mother 0)
    record = build_record([-1, 0, 0])
    assert (record[0].daughter1, record[0].daughter2) == (1, 2)
    assert record.n_compactions == 0
    check_genealogy(record)


def test_daughter_just_before_a_block_extends_it():
    # the daughter range is caller-supplied here so the append lands right
    # before it
    record = EventRecord()
    record.add(Particle(2214, FINAL, daughter1=2, daughter2=2))
    record.add(Particle(2212, FINAL, mother1=0))
    assert (record[0].daughter1, record[0].daughter2) == (1, 2)
    assert record.n_compactions == 0


def test_interleaved_daughter_forces_compaction(build_record, check_genealogy):
    # Scenario: mothers [-1, 0, -1, 0]; entry 2 is unrelated and sits between
    # the two daughters of entry 0
    record = build_record([-1, 0, -1, 0], statuses=[INIT, FINAL, FINAL, FINAL])
    assert record.n_compactions == 1
    assert (record[0].daughter1, record[0].daughter2) == (1, 2)
    assert [p.px for p in record] == [0.0, 1.0, 3.0, 2.0]
    assert record[3].mother1 == -1
    check_genealogy(record)


def test_compaction_repoints_children_of_moved_entries(build_record, check_genealogy):
    # entry 2 owns entry 3; the second daughter of 0 arrives last
    record = build_record([-1, 0, -1, 2, 0], statuses=[INIT] + [FINAL] * 4)
    assert record.n_compactions == 1
    check_genealogy(record)

    tags = [p.px for p in record]
    unrelated = tags.index(2.0)
    grandchild = tags.index(3.0)
    assert record[grandchild].mother1 == unrelated
    assert (record[unrelated].daughter1, record[unrelated].daughter2) == (grandchild, grandchild)
    assert sorted(record[k].px for k in range(record[0].daughter1, record[0].daughter2 + 1)) == [1.0, 4.0]


def test_swap_repoints_mothers_to_the_new_slot():
    seq = ParticleSequence()
    seq.append(Particle(2214, FINAL, px=0.0))
    seq.append(Particle(2212, FINAL, mother1=0, px=1.0))
    seq.append(Particle(22, FINAL, mother1=-1, mother2=0, px=2.0))
    seq.append(Particle(22, FINAL, mother1=2, px=3.0))
    comp = DaughterListCompactor(seq)

    comp.swap_and_repoint(0, 2)

    assert seq.at(2).px == 0.0
    assert seq.at(0).px == 2.0
    # daughter of the old slot-0 occupant follows it to slot 2, and the
    # other way round
    assert seq.at(1).mother1 == 2
    assert seq.at(3).mother1 == 0
    # the secondary mother field is kept pointing at the same entry
    assert seq.at(0).mother2 == 2


def test_swap_is_noop_on_same_slot_and_rejects_bad_slots():
    seq = ParticleSequence()
    seq.append(Particle(22, FINAL, px=1.0))
    comp = DaughterListCompactor(seq)
    comp.swap_and_repoint(0, 0)
    assert seq.at(0).px == 1.0
    with pytest.raises(IndexError):
        comp.swap_and_repoint(0, 1)
    with pytest.raises(IndexError):
        comp.swap_and_repoint(-1, 0)


def test_compactness_check():
    seq = ParticleSequence()
    for mom in (-1, 0, 0, -1, 0, 3):
        seq.append(Particle(211, FINAL, mother1=mom))
    comp = DaughterListCompactor(seq)
    assert not comp.has_compact_daughter_list(0)
    assert comp.has_compact_daughter_list(3)
    assert comp.has_compact_daughter_list(5)
    assert comp.daughters_of(0) == [1, 2, 4]


def test_first_non_init_state_entry_follows_append_order():
    seq = ParticleSequence()
    comp = DaughterListCompactor(seq)
    assert comp.first_non_init_state_entry() == 0
    for status in (INIT, Status.NUCLEON_TARGET, FINAL, INIT):
        comp.update(seq.append(Particle(22, status)))
    assert comp.first_non_init_state_entry() == 2
    comp.reset()
    assert comp.first_non_init_state_entry() == 0


def test_targets_packed_after_the_initial_block_stay_movable(check_genealogy):
    # later initial-state and target entries with different mothers are
    # packed next to the leading block; they must not join it
    steps = [
        (INIT, -1), (INIT, -1), (Status.HADRON_IN_THE_NUCLEUS, -1),
        (Status.NUCLEON_TARGET, 0), (Status.DIS_PRE_FRAGM_HADRONIC_STATE, 2),
        (Status.PRE_DECAY_RESONANT_STATE, -1), (Status.FINAL_STATE_NUCLEAR_REMNANT, 2),
        (Status.NUCLEON_TARGET, 1), (Status.NUCLEON_CLUSTER_TARGET, 6), (FINAL, 6),
        (Status.INTERMEDIATE_STATE, 3), (Status.UNDEFINED, 0),
    ]
    record = EventRecord()
    for tag, (status, mom) in enumerate(steps):
        record.add(Particle(211, status, mother1=mom, px=float(tag)))
        check_genealogy(record)

    assert record.compactor.first_non_init_state_entry() == 2
    assert sorted(record[k].px for k in range(record[0].daughter1, record[0].daughter2 + 1)) == [3.0, 11.0]


def test_derivation_overwrites_provisional_ranges():
    seq = ParticleSequence()
    seq.append(Particle(2214, FINAL, daughter1=7, daughter2=9))
    seq.append(Particle(2212, FINAL, mother1=0))
    seq.append(Particle(111, FINAL, mother1=0))
    comp = DaughterListCompactor(seq)
    comp.finalize_daughter_lists()
    assert (seq.at(0).daughter1, seq.at(0).daughter2) == (1, 2)
    assert (seq.at(1).daughter1, seq.at(1).daughter2) == (-1, -1)


def test_compaction_is_idempotent(build_record):
    record = build_record([-1, -1, 0, 1, 0, 2, 1, 3, 2], statuses=[INIT, INIT] + [FINAL] * 7)
    assert record.n_compactions >= 1
    record.compactor.compactify()
    first = _layout(record)
    record.compactor.compactify()
    assert _layout(record) == first


def test_struck_nucleon_siblings_follow_the_initial_state_block(check_genealogy):
    record = EventRecord()
    record.add(Particle(14, INIT))
    record.add(Particle(1000260560, INIT))
    record.add(Particle(2112, Status.NUCLEON_TARGET, mother1=1))
    record.add(Particle(13, FINAL, mother1=0))
    record.add(Particle(2214, Status.DECAYED_STATE, mother1=2))
    record.add(Particle(1000260550, Status.FINAL_STATE_NUCLEAR_REMNANT, mother1=1))

    assert record.n_compactions == 1
    check_genealogy(record)
    assert [p.pdg_code for p in record] == [14, 1000260560, 2112, 1000260550, 13, 2214]
    assert (record[1].daughter1, record[1].daughter2) == (2, 3)


def test_unresolved_mother_is_ignored(caplog):
    record = EventRecord()
    record.add(Particle(22, FINAL, mother1=-1))
    record.add(Particle(22, FINAL, mother1=5))
    assert record.n_compactions == 0
    assert "does not resolve" in caplog.text
    assert (record[0].daughter1, record[0].daughter2) == (-1, -1)


_LATER_STATUSES = [
    FINAL, FINAL, FINAL, INIT, Status.NUCLEON_TARGET, Status.DECAYED_STATE,
    Status.HADRON_IN_THE_NUCLEUS,
]


@pytest.mark.parametrize("seed", range(40))
def test_random_trees_with_late_targets_stay_consistent(seed, check_genealogy):
    rng = random.Random(1000 + seed)
    record = EventRecord()
    parent_of = {}
    for tag in range(rng.randint(3, 25)):
        if tag < 2:
            status, mom = INIT, -1
        else:
            # tag 2 closes the leading block
            status = FINAL if tag == 2 else rng.choice(_LATER_STATUSES)
            mom = rng.randrange(-1, len(record))
        parent_of[float(tag)] = record[mom].px if mom >= 0 else None
        record.add(Particle(2112, status, mother1=mom, px=float(tag)))
        check_genealogy(record)
        assert record.compactor.first_non_init_state_entry() == 2

    for p in record:
        actual = record[p.mother1].px if p.mother1 >= 0 else None
        assert actual == parent_of[p.px]


@pytest.mark.parametrize("seed", range(20))
def test_random_generation_trees_stay_consistent(seed, check_genealogy):
    rng = random.Random(seed)
    record = EventRecord()
    # intended mother tag of every tag
    parent_of = {}
    for tag in range(rng.randint(3, 25)):
        if tag < 2:
            status, mom = INIT, -1
        else:
            status = FINAL
            mom = rng.randrange(-1, len(record))
        parent_of[float(tag)] = record[mom].px if mom >= 0 else None
        record.add(Particle(211, status, mother1=mom, px=float(tag), energy=1.0))
        check_genealogy(record)

    for p in record:
        expected = parent_of[p.px]
        actual = record[p.mother1].px if p.mother1 >= 0 else None
        assert actual == expected
