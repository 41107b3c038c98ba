import argparse
import logging
import sys
from typing import List, Optional

from hangeul.domain.enums import Syllable
from hangeul.domain.errors import HangeulError, NotASyllable
from hangeul.domain.hangul_compose import compose, decompose_sequence, ends_with_tail, leads
from hangeul.domain.particles import attach_particle
from hangeul.services.logger import setup_logger
from hangeul.services.settings_store import JAMO_FORMS, SettingsStore

logger = logging.getLogger("hangeul.main")


# -------------------------------------------------
#           HELPERS
# -------------------------------------------------

def _format_syllable(syllable: Syllable, form: str) -> str:
    if form == "conjoined":
        parts = [chr(p.to_conjoined_codepoint()) for p in syllable if p is not None]
    else:
        parts = [p.to_char() for p in syllable if p is not None]
    return " ".join(parts)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hangeul",
        description="Classify, decompose and compose Korean Hangeul syllables.",
    )
    parser.add_argument("--settings", default=None, help="Path to settings.yaml")
    parser.add_argument(
        "--form",
        choices=JAMO_FORMS,
        default=None,
        help="Jamo output form (defaults to settings 'jamo_form')",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("decompose", help="Split each syllable of TEXT into jamo")
    p.add_argument("text")

    p = sub.add_parser("compose", help="Compose LEAD VOWEL [TAIL] into a syllable")
    p.add_argument("lead")
    p.add_argument("vowel")
    p.add_argument("tail", nargs="?", default=None)

    p = sub.add_parser("leads", help="Replace each syllable of TEXT with its lead consonant")
    p.add_argument("text")

    p = sub.add_parser("ends-with-tail", help="Does the last syllable of TEXT have a final consonant?")
    p.add_argument("text")

    p = sub.add_parser("particle", help="Attach the right form of PARTICLE to WORD")
    p.add_argument("word")
    p.add_argument("particle")

    return parser


# -------------------------------------------------
#           COMMANDS
# -------------------------------------------------

def _cmd_decompose(args: argparse.Namespace, form: str) -> int:
    status = 0
    for ch, result in zip(args.text, decompose_sequence(args.text)):
        if isinstance(result, NotASyllable):
            print("{}\terror: {}".format(ch, result))
            status = 1
        else:
            print("{}\t{}".format(ch, _format_syllable(result, form)))
    return status


def _cmd_compose(args: argparse.Namespace, form: str) -> int:
    print(compose(args.lead, args.vowel, args.tail))
    return 0


def _cmd_leads(args: argparse.Namespace, form: str) -> int:
    print(str(leads(args.text, form)))
    return 0


def _cmd_ends_with_tail(args: argparse.Namespace, form: str) -> int:
    print("true" if ends_with_tail(args.text) else "false")
    return 0


def _cmd_particle(args: argparse.Namespace, form: str) -> int:
    print(attach_particle(args.word, args.particle))
    return 0


_COMMANDS = {
    "decompose": _cmd_decompose,
    "compose": _cmd_compose,
    "leads": _cmd_leads,
    "ends-with-tail": _cmd_ends_with_tail,
    "particle": _cmd_particle,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    store = SettingsStore(args.settings)
    setup_logger(store.get_log_level(), store.get_log_file())
    form = args.form or store.get_jamo_form()
    logger.debug("command=%s form=%s settings=%s", args.command, form, store.path)

    try:
        return _COMMANDS[args.command](args, form)
    except HangeulError as e:
        logger.debug("command %s failed: %s", args.command, e)
        print("error: {}".format(e), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
