from io import StringIO

from pytest import fixture

from badrpn.decoder import Decoder
from badrpn.machine import Machine


@fixture
def out():
    '''
    Capturing display sink.
    '''
    return StringIO()


@fixture
def decoder():
    return Decoder()


@fixture
def machine(out):
    return Machine(out=out)


@fixture
def feed(machine, decoder):
    '''
    Run typed text through the decoder into the machine, ignoring the
    implicit quit at the end of it.
    '''
    def feed(text):
        for event in decoder.events(text):
            machine.apply(event)
        machine.halted = False
        return machine.display()
    return feed
