'''
Command line interface tests
'''

import io

from expression_parser.cli import CLI, InteractiveInput
from expression_parser.parser import Parser

from pytest import raises


def run(capsys, *args):
    status = CLI().run(args=list(args))
    out, err = capsys.readouterr()
    return status, out.splitlines(), err.splitlines()


def test_values(capsys):
    status, out, err = run(capsys, '-e', '1 + 2', '5+6*(2+3)', '1/0')
    assert status == 0
    assert out == ['3.0', '35.0', 'inf']
    assert err == []


def test_describe(capsys):
    status, out, _ = run(capsys, '-d', '-e', '5+6*(2+3)')
    assert status == 0
    assert out == ['5.0 + 6.0 * (2.0 + 3.0)']


def test_json(capsys):
    status, out, _ = run(capsys, '--json', '-e', '5', '1/3')
    assert status == 0
    assert out == ['5.0', '"1.0 / 3.0"']


def test_errors_reported_and_skipped(capsys):
    status, out, err = run(capsys, '-e', '3.', '2 * 2', '5f')
    assert status == 1
    assert out == ['4.0']
    assert err == ['Expected a digit after the decimal point at index 2.',
                   "Use of invalid character 'f' at index 1."]


def test_blank_lines_ignored(capsys):
    status, out, err = run(capsys, '-e', '', '  ', '7')
    assert status == 0
    assert out == ['7.0']
    assert err == []


def test_stdin(capsys, monkeypatch):
    lines = io.StringIO('1 + 1\n\n2 * 3\n')
    monkeypatch.setattr('expression_parser.cli.stdin', lines)
    cli = CLI()
    # Not a tty, so no prompt: read stdin as is
    monkeypatch.setattr(cli, '_interactive', lambda: False)
    status = cli.run(args=[])
    out, _ = capsys.readouterr()
    assert status == 0
    assert out.splitlines() == ['2.0', '6.0']


def test_prompt_when_asked(monkeypatch):
    cli = CLI()
    monkeypatch.setattr(cli, '_interactive', lambda: False)
    cli.args = cli.argument_parser.parse_args(['-p', '? '])
    prompting = cli._prompting_input()
    assert isinstance(prompting, InteractiveInput)
    assert prompting.prompt == '? '


def test_dump(capsys):
    status, out, _ = run(capsys, '-D', '-e', '(1 + 2.5e1)')
    assert status == 0
    assert out == ['<type>\t<position>\t<value>',
                   'left-paren\t0\t',
                   'number\t1\t1.0',
                   'operator\t3\t+',
                   'number\t5\t25.0',
                   'right-paren\t10\t',
                   'end\t11\t']


def test_dump_error(capsys):
    _, out, _ = run(capsys, '-D', '-e', '3.')
    assert out[1] == ('error\t2\t'
                      'Expected a digit after the decimal point at index 2.')
    assert out[-1] == 'end\t2\t'


def test_raw_grammar(capsys):
    _, out, _ = run(capsys, '-G', '-e')
    assert '\n'.join(out) == Parser.GRAMMAR


def test_exclusive_outputs(capsys):
    with raises(SystemExit):
        CLI().run(args=['-d', '-j', '-e', '1'])
