from os import isatty
from sys import stdin, stdout, exit
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging
import sys

from prompt_toolkit import PromptSession

from .errors import ExpressionError
from .lexer import Lexer
from .parsed import ParsedExpression
from .parser import Parser
from . import codec


logger = logging.getLogger(__name__)


class InteractiveInput:
    '''
    Expressions typed at a prompt, one per line, until end of file.
    '''

    def __init__(self, prompt):
        self.prompt = prompt

    def _session(self):
        # Long expressions can be edited in $EDITOR; ^Z suspends.
        return PromptSession(message=self.prompt,
                             enable_suspend=True,
                             enable_open_in_editor=True,
                             prompt_continuation=' ' * len(self.prompt))

    def __iter__(self):
        session = self._session()
        while True:
            try:
                yield session.prompt()
            except EOFError:
                return


class CLI:
    '''
    Command line interface to the expression parser.
    '''

    DEFAULT_PROMPT = '> '
    LOG_FORMAT = '%(levelname)s:%(name)s:%(message)s'

    def _lines(self):
        '''
        Yield non-blank input lines, stripped of their line ending.
        '''
        for line in self.args.expressions:
            line = line.rstrip('\r\n')
            if line.strip():
                yield line

    def dumper(self):
        '''
        Dump every token of every line: type, position, value.
        '''
        print('<type>\t<position>\t<value>')
        for line in self._lines():
            for token in Lexer(line):
                print(token.type.value,
                      token.position,
                      '' if token.value is None else token.value,
                      sep='\t')

    def executor(self):
        '''
        Parse and print every line, as selected by --describe/--json.
        '''
        for line in self._lines():
            try:
                expression = ParsedExpression.parse(line)
            # Report and carry on with the next line
            except ExpressionError as e:
                logger.debug('Failed to parse %r', line, exc_info=True)
                print(e, file=sys.stderr)
                self.failed = True
                continue
            print(self.format(expression))

    def format(self, expression):
        '''
        Render expression according to output format.
        '''
        if self.args.output == 'json':
            return codec.dumps(expression)
        elif self.args.output == 'description':
            return expression.description
        return repr(expression.value)

    def raw_grammar(self):
        '''
        Print the grammar the parser implements.
        '''
        print(Parser.GRAMMAR)

    def _interactive(self):
        return isatty(stdin.fileno()) and isatty(stdout.fileno())

    def _prompting_input(self):
        '''
        Return where to read expressions from when none were given.

        A prompt session when --prompt was passed or a user sits at a
        terminal; stdin as is when piped.
        '''
        if not self.args.prompt and not self._interactive():
            return stdin
        return InteractiveInput(prompt=self.args.prompt or
                                self.DEFAULT_PROMPT)

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.failed = False
        self.argument_parser = ArgumentParser(
            prog='expression-parser',
            description='Arithmetic expression evaluator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        output_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, output in [('-d', '--describe', 'description'),
                                      ('-j', '--json', 'json')]:
            output_groups.add_argument(short_, long_,
                                       action='store_const',
                                       const=output,
                                       dest='output')
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          output='value',
                                          expressions=stdin)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.

        Returns exit status: 1 if any expression failed, else 0.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(
            level=logging.DEBUG if self.args.verbose else logging.WARNING,
            format=self.LOG_FORMAT)
        if self.args.expressions is stdin:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            exit(1)
        return 1 if self.failed else 0


def main():
    exit(CLI().run())
