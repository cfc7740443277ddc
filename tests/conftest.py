from pytest import Item


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Print each passing assertion with what it compared, so a run over the
    expression tables can be audited afterwards.

    Off unless asked for:

        pytest -rP -o enable_assertion_pass_hook=true
    '''
    where = '{}:{}'.format(item.name, lineno)
    print('given', where, orig)
    # Last two lines are pytest's hint about -vv; not worth keeping.
    print('actual', where, '\n'.join(str(expl).splitlines()[:-2]))
