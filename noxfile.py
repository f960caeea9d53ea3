import os

import nox

NOXENV = os.environ.get('NOXENV')
PYTHONS = NOXENV or [
    '3.9',
    '3.10',
    '3.11',
    '3.12',
]
PYTHON = NOXENV or PYTHONS[-1]


@nox.session(python=PYTHONS)
def test(session):
    session.install('-e', '.[test]')
    session.run(
        'pytest',
        '-Wall',
        '--cov',
        'libinsertpos',
        '--cov-report',
        'term-missing',
        *session.posargs,
    )


@nox.session(python=PYTHON)
def static(session):
    session.install('-e', '.', 'mypy')
    session.run('mypy', '-p', 'libinsertpos')


@nox.session(python=PYTHON)
def lint(session):
    session.install('flake8')
    session.run(
        'flake8',
        '--max-line-length', '100',
        'libinsertpos',
        'noxfile.py',
        'test',
    )


@nox.session(python=PYTHON)
def format(session):
    session.install('isort')
    session.run('isort', 'libinsertpos', 'test')


@nox.session(python=PYTHON)
def package(session):
    session.install('build', 'twine')
    session.run('python3', '-m', 'build')
    session.run('twine', 'check', 'dist/*')
