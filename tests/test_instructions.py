import pytest

from tortuelang.conditions import ConditionCapteur, TestBinaire
from tortuelang.contexte import Contexte
from tortuelang.expressions import Constante, Variable
from tortuelang.instructions import (
    AppelFonction,
    Bloc,
    CommandeCouleur,
    CommandeMouvement,
    CommandeSelectionTortue,
    ControleRepete,
    ControleSi,
    ControleTantQue,
    Instruction,
)
from tortuelang.types import Direction, OperateurBool, TypeCapteur, TypeMouvement


class RecordingDriver:
    def __init__(self, sensor_answers=()):
        self.sensor_answers = list(sensor_answers)
        self.moves = []
        self.colours = []
        self.calls = []

    def verifier_capteur(self, type_capteur, direction, tortue):
        return self.sensor_answers.pop(0) if self.sensor_answers else False

    def bouger(self, type_mouvement, valeur):
        self.moves.append((type_mouvement, valeur))

    def changer_couleur(self, r, g, b):
        self.colours.append((r, g, b))

    def appeler_fonction(self, nom, arguments, ctx):
        self.calls.append((nom, arguments, ctx))


@pytest.fixture
def ctx():
    return Contexte()


def avance(n):
    return CommandeMouvement(Constante(n), TypeMouvement.AVANCE)


def test_instruction_is_abstract():
    with pytest.raises(TypeError):
        Instruction()


def test_mouvement_evaluates_expression(ctx):
    ctx["d"] = 15.0
    drv = RecordingDriver()
    CommandeMouvement(Variable("d"), TypeMouvement.RECULE).executer(ctx, drv)
    assert drv.moves == [(TypeMouvement.RECULE, 15.0)]


def test_couleur_forwarded(ctx):
    drv = RecordingDriver()
    CommandeCouleur(255, 128, 0).executer(ctx, drv)
    assert drv.colours == [(255, 128, 0)]


def test_selection_sets_current_turtle(ctx):
    CommandeSelectionTortue(Constante(3.7)).executer(ctx, RecordingDriver())
    assert ctx.tortue_courante == 3


def test_bloc_runs_in_order_and_sizes(ctx):
    bloc = Bloc()
    bloc.ajouter(avance(1.0))
    bloc.ajouter(avance(2.0))
    drv = RecordingDriver()
    bloc.executer(ctx, drv)
    assert len(bloc) == 2
    assert [v for _, v in drv.moves] == [1.0, 2.0]
    assert list(bloc) == [avance(1.0), avance(2.0)]


def test_empty_bloc_does_nothing(ctx):
    drv = RecordingDriver()
    Bloc().executer(ctx, drv)
    assert drv.moves == []


def test_appel_fonction_passes_values(ctx):
    ctx["n"] = 4.0
    drv = RecordingDriver()
    AppelFonction("carre", [Variable("n"), Constante(2.0)]).executer(ctx, drv)
    assert drv.calls == [("carre", [4.0, 2.0], ctx)]


def test_si_true_runs_alors(ctx):
    drv = RecordingDriver()
    cond = TestBinaire(Constante(1.0), Constante(1.0), OperateurBool.egal)
    ControleSi(cond, avance(1.0), avance(2.0)).executer(ctx, drv)
    assert drv.moves == [(TypeMouvement.AVANCE, 1.0)]


def test_si_false_runs_sinon(ctx):
    drv = RecordingDriver()
    cond = TestBinaire(Constante(1.0), Constante(1.0), OperateurBool.different)
    ControleSi(cond, avance(1.0), avance(2.0)).executer(ctx, drv)
    assert drv.moves == [(TypeMouvement.AVANCE, 2.0)]


def test_si_false_without_sinon_does_nothing(ctx):
    drv = RecordingDriver()
    cond = TestBinaire(Constante(1.0), Constante(2.0), OperateurBool.plusgrand)
    ControleSi(cond, avance(1.0)).executer(ctx, drv)
    assert drv.moves == []


def test_tant_que_loops_while_sensor_true(ctx):
    answers = [True, True, True, False]
    drv = RecordingDriver(answers)
    loop = ControleTantQue(ConditionCapteur(TypeCapteur.VIDE, Direction.DEVANT), avance(1.0))
    loop.executer(ctx, drv)
    assert len(drv.moves) == answers.index(False)


def test_repete_truncates_count(ctx):
    drv = RecordingDriver()
    ControleRepete(Constante(3.9), avance(1.0)).executer(ctx, drv)
    assert len(drv.moves) == 3


def test_repete_negative_count_runs_nothing(ctx):
    drv = RecordingDriver()
    ControleRepete(Constante(-2.0), avance(1.0)).executer(ctx, drv)
    assert drv.moves == []