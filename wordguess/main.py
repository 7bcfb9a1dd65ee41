import argparse
import logging
import random
import sys

from colorama import init

from wordguess.config import load_settings
from wordguess.display import render_board, render_keyboard
from wordguess.evaluator import WORD_LENGTH
from wordguess.keyboard import ENTER
from wordguess.session import GameSession, KeyAction, RejectReason
from wordguess.word_bank import WordBank

QUIT_COMMANDS = {":q", ":quit"}
NEW_COMMANDS = {":new", ":n"}


def build_parser():
    parser = argparse.ArgumentParser(prog="wordguess", description="Guess the five-letter word.")
    parser.add_argument("--words", help="dictionary file used to validate guesses")
    parser.add_argument("--answers", help="file of candidate target words")
    parser.add_argument("--seed", type=int, help="seed for target selection")
    return parser


def build_session(args, settings):
    seed = args.seed if args.seed is not None else settings.seed
    bank = WordBank.from_files(
        args.words or settings.words_file,
        args.answers or settings.answers_file,
        policy=settings.exhaustion_policy,
        fallback_word=settings.fallback_word,
        rng=random.Random(seed),
    )
    return GameSession(bank, max_guesses=settings.max_guesses)


def play_line(session, line):
    """Type ``line`` into the session as key presses followed by Enter."""
    for char in line:
        session.handle_key(char)
    return session.handle_key(ENTER)


def ask_replay():
    try:
        answer = input("Play again? [y/N] ").strip().lower()
    except EOFError:
        return False
    return answer in {"y", "yes"}


def main(argv=None):
    args = build_parser().parse_args(argv)
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    init(autoreset=True)

    session = build_session(args, settings)
    print("Welcome to wordguess!")
    print(f"You have {session.max_guesses} attempts. Type :new to restart or :q to quit.")

    while True:
        try:
            raw = input(f"Guess {session.attempts + 1}/{session.max_guesses}: ").strip()
        except EOFError:
            print()
            return 0

        if raw.lower() in QUIT_COMMANDS:
            return 0
        if raw.lower() in NEW_COMMANDS:
            session.reset()
            print("New word drawn.")
            continue

        # drop whatever is left in the buffer from a rejected line
        while session.current_guess:
            session.handle_key("Backspace")

        if len(raw) != WORD_LENGTH:
            print("Invalid guess. Please enter a 5-letter word.")
            continue

        outcome = play_line(session, raw)
        if outcome.action is not KeyAction.SUBMITTED:
            if outcome.guess and outcome.guess.reason is RejectReason.INVALID_GUESS:
                print("Not in word list.")
            else:
                print("Invalid guess. Please enter a 5-letter word.")
            continue

        print(render_board(session.board()))
        print()
        print(render_keyboard(session.keyboard.rows()))

        if session.is_game_over:
            if session.is_winner:
                print("Congratulations! You guessed the word!")
            else:
                print(f"The word was: {session.target.upper()}")
            if not ask_replay():
                return 0
            session.reset()


if __name__ == "__main__":
    sys.exit(main())
