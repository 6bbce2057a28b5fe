import dataclasses

import pytest

from tortuelang.rendering import JardinRendering, PointF


class _Grille(JardinRendering):
    def __init__(self, murs):
        self.murs = set(murs)

    def construction(self, nom):
        pass

    def nombre_tortues(self):
        return 0

    def nouvelle_tortue(self):
        pass

    def position(self, tortue):
        return PointF(0.0, 0.0)

    def orientation(self, tortue):
        return 0.0

    def change_position(self, tortue, x, y):
        pass

    def change_orientation(self, tortue, angle):
        pass

    def change_couleur(self, tortue, r, g, b):
        pass

    def dessiner_ligne(self, x1, y1, x2, y2):
        pass

    def changer_couleur(self, r, g, b):
        pass

    def est_mur(self, x, y):
        return (x, y) in self.murs


class _Partiel(JardinRendering):
    def est_mur(self, x, y):
        return False


def test_interface_and_incomplete_subclass_cannot_be_instantiated():
    with pytest.raises(TypeError):
        JardinRendering()
    with pytest.raises(TypeError):
        _Partiel()


@pytest.mark.parametrize("cellule", [(0, 0), (1, 2), (4, 4)])
def test_est_vide_is_negation_of_est_mur(cellule):
    grille = _Grille([(1, 2)])
    vide = JardinRendering.est_vide(grille, *cellule)
    assert vide is (cellule != (1, 2))


def test_est_vide_false_on_wall():
    grille = _Grille([(3, 1)])
    assert JardinRendering.est_vide(grille, 3, 1) is False
    assert JardinRendering.est_vide(grille, 1, 3) is True


def test_pointf_fields_and_equality():
    p = PointF(1.5, -2.0)
    assert (p.x, p.y) == (1.5, -2.0)
    assert p == PointF(1.5, -2.0)


def test_pointf_is_immutable():
    p = PointF(1.0, 1.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.x = 3.0
    assert p.x == 1.0
    assert p == PointF(1.0, 1.0)