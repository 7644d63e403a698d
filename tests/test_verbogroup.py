import pytest

from ymcommon.verbogroup import VG, VerboGroup, get_group, get_mask, n_groups


def test_n_groups_matches_enum():
    assert n_groups() == len(list(VerboGroup))


def test_groups_are_contiguous_from_zero():
    assert sorted(int(g) for g in VerboGroup) == list(range(n_groups()))
    assert VerboGroup.DEBUG == 0


@pytest.mark.parametrize("vg", list(VG))
def test_group_and_mask_recompose(vg):
    assert (int(get_group(vg)) << 8) | get_mask(vg) == vg


@pytest.mark.parametrize("group", list(VerboGroup))
def test_every_group_has_full_mask(group):
    vg = VG[group.name]
    assert get_group(vg) is group
    assert get_mask(vg) == 0xFF


def test_sub_group_masks():
    assert get_group(VG.TEXT_LOGGER_BASIC) is VerboGroup.TEXT_LOGGER
    assert get_mask(VG.TEXT_LOGGER_BASIC) == 0b0000_0001
    assert get_mask(VG.TEXT_LOGGER_DETAIL) == 0b0000_0010
    assert get_group(VG.RNG_TRNG) is VerboGroup.RNG
    assert get_group(VG.YM_ERROR_ASSERT) is VerboGroup.YM_ERROR


def test_sub_masks_are_within_full_group_mask():
    for vg in (VG.TEXT_LOGGER_BASIC, VG.TEXT_LOGGER_DETAIL, VG.RNG_PRNG, VG.RNG_TRNG):
        full = VG[get_group(vg).name]
        assert get_mask(vg) & get_mask(full) == get_mask(vg)


def test_get_group_rejects_unknown_group():
    with pytest.raises(ValueError):
        get_group(n_groups() << 8)