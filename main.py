import logging

from rps_game.core.game_engine import GameEngine


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    game = GameEngine()
    game.run()


if __name__ == "__main__":
    main()
