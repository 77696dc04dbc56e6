import argparse
import logging
import sys

from ff1_crypto import (
    FF1Cipher,
    FF1Error,
    key_material,
    prepare_input,
    read_lines,
    run_known_answers,
    wrap_lines,
)

# Log to stderr; stdout carries only cipher output
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

log = logging.getLogger('ff1')

# Hex digits in, hex digits out
RADIX = 16
# Longest tweak accepted from the tweak file, in bytes
MAX_TWEAK_LEN = 8

USAGE = (
    "Usage: ff1 -k <keyfile> -t <tweakfile> [-d] [-p <padding>] [-w <width>] < infile > outfile\n"
    "       Infile = one long hex line, created with a base16 encoder or xxd."
)


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _build_parser():
    parser = _ArgumentParser(prog='ff1', description="FF1 format-preserving encryption of hex data (radix 16)")
    parser.add_argument('-k', '--keyfile', help='Path to the key file (128, 192 or 256 bit, hex encoded)')
    parser.add_argument('-t', '--tweakfile', help=f'Path to the tweak file (up to {MAX_TWEAK_LEN * 8} bit, hex encoded)')
    parser.add_argument('-d', '--decrypt', action='store_true', help='Decrypt the data instead of encrypting it')
    parser.add_argument('-p', '--padding', type=int, default=0, help='Right-pad the input with 0 up to this many characters')
    parser.add_argument('-w', '--width', type=int, default=0, help='Wrap the output into lines of this width')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log debug messages')
    parser.add_argument('--selftest', action='store_true', help='Run the NIST SP 800-38G FF1 sample vectors and exit')
    return parser


def _selftest():
    failed = run_known_answers()
    if failed:
        log.error("FF1 known-answer samples failed: %s", ', '.join(str(n) for n in failed))
        return 1
    log.info("All FF1 known-answer samples passed")
    return 0


def transform(cipher, data, decrypt=False, padding=0, width=0):
    """Apply the CLI's input shaping, run the cipher and format the output."""
    data = prepare_input(data, decrypt, padding)
    output = cipher.decrypt(data) if decrypt else cipher.encrypt(data)
    return wrap_lines(output, width)


def main(argv=None):
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.selftest:
        return _selftest()

    if not args.keyfile or not args.tweakfile:
        print(USAGE)
        return 1

    action = 'decrypting' if args.decrypt else 'encrypting'
    try:
        with key_material(args.keyfile, args.tweakfile) as (key, tweak):
            try:
                cipher = FF1Cipher(RADIX, MAX_TWEAK_LEN, key, tweak)
            except FF1Error as e:
                log.error("Error creating FF1 cipher: %s", e)
                return 1

            with cipher:
                try:
                    data = read_lines(sys.stdin)
                except (OSError, UnicodeDecodeError) as e:
                    log.error("Error reading input data: %s", e)
                    return 1

                log.debug("%s %d characters", action.capitalize(), len(data))
                try:
                    output = transform(cipher, data, args.decrypt, args.padding, args.width)
                except FF1Error as e:
                    log.error("Error %s data: %s", action, e)
                    return 1
    except OSError as e:
        log.error("Error reading key material: %s", e)
        return 1
    except ValueError as e:
        log.error("Error decoding key material: %s", e)
        return 1

    try:
        sys.stdout.write(output)
        sys.stdout.flush()
    except OSError as e:
        log.error("Error writing output data: %s", e)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
