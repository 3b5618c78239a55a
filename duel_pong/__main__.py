import sys

from duel_pong.gui.game_app import main

sys.exit(main())
