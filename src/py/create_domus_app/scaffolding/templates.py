"""Static file contents for generated projects.

Everything here is literal text or plain data. The only value substituted into
a source stub is the fallback listening port.
"""

from textwrap import dedent
from typing import Any

__all__ = (
    "ESLINT_CONFIG",
    "ROUTES_TS",
    "SERVER_TS",
    "TSCONFIG",
    "render_index_ts",
)

TSCONFIG: dict[str, Any] = {
    "compilerOptions": {
        "target": "es2016",
        "lib": ["es2022"],
        "experimentalDecorators": True,
        "emitDecoratorMetadata": True,
        "module": "commonjs",
        "resolveJsonModule": True,
        "outDir": "dist",
        "esModuleInterop": True,
        "forceConsistentCasingInFileNames": True,
        "strict": True,
        "skipLibCheck": True,
    }
}

ESLINT_CONFIG = dedent(
    """\
    import eslintPluginTs from '@typescript-eslint/eslint-plugin';
    import parserTs from '@typescript-eslint/parser';

    export default [
      {
        files: ['**/*.ts'],
        ignores: ['dist/**', 'node_modules/**'],
        languageOptions: {
          parser: parserTs,
          parserOptions: {
            project: './tsconfig.json',
            sourceType: 'module'
          }
        },
        plugins: {
          '@typescript-eslint': eslintPluginTs
        },
        rules: {
          semi: ['error', 'always'],
          quotes: ['error', 'single'],
          '@typescript-eslint/explicit-module-boundary-types': 'off'
        }
      }
    ];
    """
)

_INDEX_TS = dedent(
    """\
    import 'reflect-metadata';

    import { container } from 'tsyringe';
    import { Logger } from '@domusjs/core';
    import { registerDomusCore, PinoLogger } from '@domusjs/infrastructure';

    import { createServer } from './server';

    async function registerDependencies() {
      registerDomusCore({
        logger: new PinoLogger()
      });
    }

    async function bootstrap() {
      await registerDependencies(); // Register all dependencies before starting the server

      const logger = container.resolve<Logger>('Logger');

      try {
        const app = createServer();
        const port = process.env.PORT || __PORT__;

        app.listen(port, () => {
          logger.info(`Server running on port ${port}`);
        });

        process.on('SIGINT', async () => {
          logger.info('Shutting down...');
          process.exit(0);
        });
      } catch (err) {
        logger.error('Error in bootstrap', err);
      }
    }

    bootstrap();
    """
)

SERVER_TS = dedent(
    """\
    import express from 'express';
    import routes from './routes';
    import { errorHandler } from '@domusjs/infrastructure';

    export function createServer() {
      const app = express();

      app.use(express.json());
      app.use(routes);
      app.use(errorHandler);

      return app;
    }
    """
)

ROUTES_TS = dedent(
    """\
    import { Router } from 'express';

    const router = Router();

    router.get('/', (req, res) => {
      res.send('Hello World');
    });

    export default router;
    """
)


def render_index_ts(port: int) -> str:
    """Render the entry point stub.

    Args:
        port: Port used when the ``PORT`` environment variable is unset.

    Returns:
        The ``index.ts`` source.
    """
    return _INDEX_TS.replace("__PORT__", str(int(port)))
