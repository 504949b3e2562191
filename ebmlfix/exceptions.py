class EBMLException(Exception):
    '''Base class to extend in order to throw exception in ebmlfix.

    It takes a single argument that represents the chain of the elements that
    caused the exception.
    '''

    def __init__(self, chain, msg=None):
        self.chain = chain
        super().__init__(msg if msg is not None else ' -> '.join(str(_) for _ in chain))


class VintException(EBMLException):
    '''The variable length integer cannot be decoded or encoded.'''
    pass


class UnpackException(EBMLException):
    pass


class ChunkUnpackException(EBMLException):
    pass


class PackException(EBMLException):
    '''The bytes written don't match the size computed during the relayout.'''
    pass
