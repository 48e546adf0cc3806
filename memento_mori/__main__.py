from memento_mori.cli import main

raise SystemExit(main())
