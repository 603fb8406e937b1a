# trivia

A console trivia game for two to four players, with prompts in Spanish. Each
player in turn answers random multiple-choice questions until they get one
wrong; every correct answer is worth 15 points. If two or more players finish
level on the top score, the tied players answer a random `a + b * c`
arithmetic question and the closest answer earns one extra point; this repeats
until one player leads. Each player's best score is kept in a high-score file
between games.

## Installing

```
pip install .
```

## Playing

Run the game from a directory that holds its three data files:

```
trivia
```

or point it at another directory:

```
trivia --data-dir path/to/data
```

If a data file cannot be opened, the game prints an error and exits with
status 1. The game ends when you choose to quit or when input runs out.

The main menu offers:

1. Play a match (2 to 4 players, each identified by DNI; a new DNI is asked
   for an alias, a known one keeps its stored alias)
2. Show the high-score table
3. Look up your player by DNI, then change your alias or DNI, or delete it
4. Read about the rules
5. Quit

After a match, known players' best scores are raised if they beat them, and
new players are added to the table.

## Data files

All three files are plain UTF-8 text with `;` as the field separator, one
record per line. Blank lines are ignored.

- `jugadores.txt`: the high-score table, `alias;dni;best_score`.
  Players with DNI `0` are skipped when the file is read. The game rewrites
  this file after every match and after every change made from the player
  menu.
- `preguntas.txt`: questions, `question_number;question text`.
- `respuestas.txt`: answers, `answer_number;answer text;question_number;correct`,
  where `answer_number` runs from 1 to 4 within a question (any other number
  is an error) and `correct` is `1` for the right answer and `0` otherwise.

The order in which a question's answers are shown is shuffled when the files
are loaded.

Example `preguntas.txt`:

```
1;Cuantos lados tiene un hexagono?
```

Example `respuestas.txt`:

```
1;6;1;1
2;5;1;0
3;8;1;0
4;4;1;0
```

## Using it as a library

- `trivia.juego.Game` holds the menus (`run_menu`, `play`, `edit_menu`,
  `info_menu`) over a `trivia.console.Console`, which reads from and writes to
  any text streams.
- `trivia.jugador` has the players file (`load_players`, `save_players`) and
  the match flow (`play_round`, `announce_winner`, `merge_results`).
- `trivia.pregunta` and `trivia.respuesta` load and parse questions and
  answers.
- `trivia.puntos.Score` keeps a player's points.

## Development

```
pip install -e .[test]
pytest
```