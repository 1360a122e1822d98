# menu_view.py
import arcade
from settings import WIDTH, HEIGHT, TITLE, WHITE, GRAY, GROUND, PARA_BACK, PARA_MID

class MenuView(arcade.View):
    def __init__(self, core_factory):
        super().__init__()
        self.core_factory = core_factory

        # Background: two parallax strips that scroll & wrap
        self.strips = [
            {"left": float(i * WIDTH), "bottom": 40.0, "h": 110.0, "speed": 20.0, "color": PARA_BACK}
            for i in range(2)
        ] + [
            {"left": float(i * WIDTH), "bottom": 40.0, "h": 60.0, "speed": 45.0, "color": PARA_MID}
            for i in range(2)
        ]

        # Title text
        self.title_text = arcade.Text(TITLE, WIDTH/2, HEIGHT*0.62, WHITE, 36, anchor_x="center")
        self.sub_text = arcade.Text("Press ENTER to Play", WIDTH/2, HEIGHT*0.48, WHITE, 20, anchor_x="center")
        self.help_text = arcade.Text("SPACE/Click = Jump    ESC = Pause    R = Restart",
                                     WIDTH/2, HEIGHT*0.36, GRAY, 16, anchor_x="center")

    def on_update(self, dt: float):
        # Slow background drift
        for s in self.strips:
            s["left"] -= s["speed"] * dt
            if s["left"] + WIDTH < 0:
                s["left"] += WIDTH * 2

    def on_draw(self):
        self.clear()
        for s in self.strips:
            arcade.draw_lbwh_rectangle_filled(s["left"], s["bottom"], WIDTH, s["h"], s["color"])
        arcade.draw_lbwh_rectangle_filled(0, 0, WIDTH, 40, GROUND)
        self.title_text.draw()
        self.sub_text.draw()
        self.help_text.draw()

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol in (arcade.key.ENTER, arcade.key.RETURN):
            from game_view import GameView
            self.window.show_view(GameView(self.core_factory))
