class PlayerComponent:
    def __init__(self, player_name: str = "player", score: int = 10):
        self.name = player_name
        self.score = score
        self.alive = True

    @classmethod
    def create(cls, entity, player_name: str = "player", score: int = 10, **_):
        return cls(player_name, score)
