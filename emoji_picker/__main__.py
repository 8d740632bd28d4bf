from emoji_picker.cli import main

raise SystemExit(main())
