import pytest
from dockdsl.UTILS.string_interpolation import EnvironmentInterpolator

def test_interpolate():
    context = {'IMAGE': 'python', 'TAG': '', 'USER': 'app'}
    assert EnvironmentInterpolator.interpolate('${IMAGE}:3.12', context) == 'python:3.12'
    assert EnvironmentInterpolator.interpolate('${TAG:-latest}', context) == 'latest'
    assert EnvironmentInterpolator.interpolate('${MISSING:-x}', context) == 'x'
    assert EnvironmentInterpolator.interpolate('${USER:+--chown=app}', context) == '--chown=app'
    assert EnvironmentInterpolator.interpolate('${TAG:+set}', context) == ''

def test_dollar_escape():
    assert EnvironmentInterpolator.interpolate('ENV PATH $${HOME}/bin:$$PATH', {}) == 'ENV PATH ${HOME}/bin:$PATH'

def test_plain_dollar_untouched():
    assert EnvironmentInterpolator.interpolate('echo $HOME', {}) == 'echo $HOME'

def test_missing_variable():
    with pytest.raises(KeyError):
        EnvironmentInterpolator.interpolate('${NOPE}', {})
