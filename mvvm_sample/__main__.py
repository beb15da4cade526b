import sys

from mvvm_sample.main import main

sys.exit(main())
