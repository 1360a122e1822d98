# pause_view.py
import arcade
from settings import WIDTH, HEIGHT, WHITE, GRAY, OVERLAY

class PauseView(arcade.View):
    """Freezes the run: the core is not ticked while this view is shown."""

    def __init__(self, game_view: arcade.View):
        super().__init__()
        self.game_view = game_view
        self.title = arcade.Text("Paused", WIDTH/2, HEIGHT/2 + 30, WHITE, 28, anchor_x="center")
        self.hint = arcade.Text("ESC = Resume    M = Menu", WIDTH/2, HEIGHT/2 - 10, GRAY, 16, anchor_x="center")

    def on_draw(self):
        # Draw the frozen run behind a dim overlay
        self.game_view.on_draw()
        arcade.draw_lbwh_rectangle_filled(0, 0, WIDTH, HEIGHT, OVERLAY)
        self.title.draw()
        self.hint.draw()

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == arcade.key.ESCAPE:
            self.window.show_view(self.game_view)
        elif symbol in (arcade.key.M,):
            from menu_view import MenuView
            self.window.show_view(MenuView(self.game_view.core_factory))
