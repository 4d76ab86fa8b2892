from dft_challenge.cli import main

raise SystemExit(main())
