from spa_json.cli import main

main()
