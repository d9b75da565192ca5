class IsoCodecError(ValueError):
    pass


class InvalidFormatError(IsoCodecError):
    pass


class InvalidLengthError(IsoCodecError):
    pass


class ReservedNameError(IsoCodecError):
    pass


class UnknownElementError(IsoCodecError):
    pass


class InvalidTypeError(IsoCodecError):
    pass


class ValueNotCompliantError(IsoCodecError):
    pass


class ValueTooLongError(IsoCodecError):
    pass


class InvalidMTIError(IsoCodecError):
    pass


class NoBitmapError(IsoCodecError):
    pass


class NotDeclaredError(IsoCodecError):
    pass


class SecondaryBitmapMissingError(IsoCodecError):
    pass


class IncompleteMessageError(IsoCodecError):
    pass


class InvalidArgumentError(IsoCodecError):
    pass


class InvalidBitmapError(IsoCodecError):
    pass


class HeaderPresentError(InvalidArgumentError):
    pass
