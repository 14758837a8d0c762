"""End-to-end test of the demo driver output."""

from fields import sim

EXPECTED = """\
E_default = (0.0000, 0.0000, 0.0000)
E_components = (100000.0000, 10.9000, 170.0000)
E_set = (3.0000, 4.0000, 12.0000)
Magnitude(E_default)   = 0.0000
Magnitude(E_components)= 100000.1451
Magnitude(E_set)       = 13.0000
Inner product (E_components · E_components) = 10000029018.8100

B_default = (0.0000, 0.0000, 0.0000)
B_components = (0.3000, -1.2000, 2.4000)
B_set = (5.0000, 0.0000, 0.0000)
Magnitude(B_default)   = 0.0000
Magnitude(B_components)= 2.7000
Magnitude(B_set)       = 5.0000
Unit vector of B_components = (0.1111, -0.4444, 0.8889)
Unit vector of B_default is undefined (zero vector).
"""


def test_main_output(capsys):
    sim.main()
    out, err = capsys.readouterr()
    assert out == EXPECTED
    assert err == ""


def test_main_is_repeatable(capsys):
    sim.main()
    first = capsys.readouterr().out
    sim.main()
    assert capsys.readouterr().out == first
