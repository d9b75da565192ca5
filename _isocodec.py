#
# isocodec | ISO-8583 messages builder and parser
#
# Install the package, then run the file by the following command - "python _isocodec.py --parse <message>"
#
# See "python _isocodec.py --help" for the command line options
#

from isocodec.launcher import run


if __name__ == "__main__":
    run()
